"""Bundled mock catalog loaded into an empty database at startup."""

from __future__ import annotations

AMENITIES = [
    "AC", "WiFi", "Parking", "Gym", "Pool", "Elevator", "Security",
    "Balcony", "Power Backup", "Meals", "Laundry", "Housekeeping", "Garden",
]

CITY_LOCALITIES: dict[str, list[str]] = {
    "Navi Mumbai": ["Kharghar", "CBD Belapur", "Vashi", "Nerul"],
    "Mumbai": ["Andheri", "Bandra", "Dadar"],
    "Pune": ["Kothrud", "Hinjewadi", "Baner"],
    "Delhi": ["Saket", "Dwarka", "Rohini"],
    "Bangalore": ["Koramangala", "Whitefield", "Indiranagar"],
}

SEED_LISTINGS: list[dict] = [
    {
        "id": "prop-1",
        "property_type": "Rental",
        "title": "Sunlit 2BHK near Central Park",
        "rent": 28000,
        "area": 1050,
        "city": "Navi Mumbai",
        "locality": "Kharghar",
        "state": "Maharashtra",
        "complete_address": "Flat 702, Sai Sangam, Sector 20, Kharghar, Navi Mumbai 410210",
        "partial_address": "Sector 20, Kharghar",
        "owner_name": "Rajesh Patil",
        "contact_phone": "9820012345",
        "contact_email": "rajesh.patil@example.com",
        "description": "Corner flat with two balconies, a short walk from Central Park and the Kharghar station.",
        "furnished_status": "Semi-Furnished",
        "amenities": ["Parking", "Elevator", "Security", "Balcony", "Power Backup"],
        "size": "2 BHK",
        "images": ["https://placehold.co/600x400", "https://placehold.co/600x400"],
        "video_url": "https://example.com/videos/prop-1.mp4",
        "views": 412,
        "owner_id": "owner-1",
        "broker_status": "Without Broker",
    },
    {
        "id": "prop-2",
        "property_type": "Rental",
        "title": "Compact 1BHK for working professionals",
        "rent": 18000,
        "area": 620,
        "city": "Navi Mumbai",
        "locality": "Vashi",
        "state": "Maharashtra",
        "complete_address": "B-304, Palm Beach Residency, Sector 17, Vashi, Navi Mumbai 400703",
        "partial_address": "Sector 17, Vashi",
        "owner_name": "Sunita Deshmukh",
        "contact_phone": "9867054321",
        "description": "Well-kept 1BHK close to Inorbit Mall and the Vashi bus depot.",
        "furnished_status": "Furnished",
        "amenities": ["AC", "WiFi", "Elevator", "Security"],
        "size": "1 BHK",
        "images": ["https://placehold.co/600x400"],
        "views": 233,
        "owner_id": "owner-2",
        "broker_status": "With Broker",
    },
    {
        "id": "prop-3",
        "property_type": "Rental",
        "title": "Spacious 3BHK with garden view",
        "rent": 45000,
        "area": 1600,
        "city": "Navi Mumbai",
        "locality": "Nerul",
        "state": "Maharashtra",
        "complete_address": "Villa 12, Seawoods Estates, Sector 54, Nerul, Navi Mumbai 400706",
        "partial_address": "Sector 54, Nerul",
        "owner_name": "Anil Menon",
        "contact_phone": "9819988776",
        "contact_email": "anil.menon@example.com",
        "description": "Family home in a gated complex with a landscaped garden and club house.",
        "furnished_status": "Unfurnished",
        "amenities": ["Parking", "Gym", "Pool", "Security", "Garden", "Power Backup"],
        "size": "3 BHK",
        "images": ["https://placehold.co/600x400", "https://placehold.co/600x400"],
        "views": 158,
        "owner_id": "owner-3",
        "broker_status": "Without Broker",
    },
    {
        "id": "prop-4",
        "property_type": "Rental",
        "title": "Premium 2BHK in Bandra West",
        "rent": 85000,
        "area": 980,
        "city": "Mumbai",
        "locality": "Bandra",
        "state": "Maharashtra",
        "complete_address": "5th Floor, Sea Breeze, Carter Road, Bandra West, Mumbai 400050",
        "partial_address": "Carter Road, Bandra",
        "owner_name": "Farah Khan",
        "contact_phone": "9833011223",
        "description": "Sea-facing apartment with modular kitchen and covered parking.",
        "furnished_status": "Furnished",
        "amenities": ["AC", "WiFi", "Parking", "Elevator", "Security", "Balcony"],
        "size": "2 BHK",
        "images": ["https://placehold.co/600x400"],
        "views": 890,
        "owner_id": "owner-4",
        "broker_status": "With Broker",
    },
    {
        "id": "pg-1",
        "property_type": "PG",
        "title": "Girls PG near CBD Belapur station",
        "rent": 9000,
        "area": 300,
        "city": "Navi Mumbai",
        "locality": "CBD Belapur",
        "state": "Maharashtra",
        "complete_address": "Shree Krupa PG, Plot 8, Sector 11, CBD Belapur, Navi Mumbai 400614",
        "partial_address": "Sector 11, CBD Belapur",
        "owner_name": "Meena Kulkarni",
        "contact_phone": "9892233445",
        "description": "Home-cooked meals twice a day, housekeeping and a secure entry.",
        "furnished_status": "Furnished",
        "amenities": ["WiFi", "Meals", "Laundry", "Housekeeping", "Security"],
        "size": "Double Sharing",
        "images": ["https://placehold.co/600x400"],
        "views": 341,
        "owner_id": "owner-5",
        "broker_status": "Without Broker",
        "beds": [
            {"id": "B1", "status": "occupied"},
            {"id": "B2", "status": "vacant"},
        ],
    },
    {
        "id": "pg-2",
        "property_type": "PG",
        "title": "Single rooms for students, Kharghar",
        "rent": 12000,
        "area": 180,
        "city": "Navi Mumbai",
        "locality": "Kharghar",
        "state": "Maharashtra",
        "complete_address": "Orchid Stay, Plot 45, Sector 12, Kharghar, Navi Mumbai 410210",
        "partial_address": "Sector 12, Kharghar",
        "owner_name": "Vikram Shetty",
        "contact_phone": "9769011122",
        "contact_email": "orchidstay@example.com",
        "description": "Private AC rooms close to the colleges of Kharghar, meals included.",
        "furnished_status": "Furnished",
        "amenities": ["AC", "WiFi", "Meals", "Laundry", "Power Backup"],
        "size": "Single Room",
        "images": ["https://placehold.co/600x400", "https://placehold.co/600x400"],
        "views": 276,
        "owner_id": "owner-6",
        "broker_status": "Without Broker",
        "beds": [
            {"id": "R101", "status": "vacant"},
            {"id": "R102", "status": "vacant"},
            {"id": "R103", "status": "occupied"},
        ],
    },
    {
        "id": "pg-3",
        "property_type": "PG",
        "title": "Budget triple sharing in Vashi",
        "rent": 6500,
        "area": 350,
        "city": "Navi Mumbai",
        "locality": "Vashi",
        "state": "Maharashtra",
        "complete_address": "Om Sai PG, Sector 9, Vashi, Navi Mumbai 400703",
        "partial_address": "Sector 9, Vashi",
        "owner_name": "Ganesh Jadhav",
        "contact_phone": "9321456789",
        "description": "Affordable stay for boys, five minutes from Vashi station.",
        "furnished_status": "Semi-Furnished",
        "amenities": ["WiFi", "Laundry"],
        "size": "Triple Sharing",
        "images": ["https://placehold.co/600x400"],
        "views": 97,
        "owner_id": "owner-7",
        "broker_status": "With Broker",
        "beds": [
            {"id": "T1", "status": "occupied"},
            {"id": "T2", "status": "occupied"},
            {"id": "T3", "status": "occupied"},
        ],
    },
    {
        "id": "pg-4",
        "property_type": "PG",
        "title": "Co-living near Hinjewadi IT park",
        "rent": 14000,
        "area": 220,
        "city": "Pune",
        "locality": "Hinjewadi",
        "state": "Maharashtra",
        "complete_address": "NestCo Living, Phase 1, Hinjewadi, Pune 411057",
        "partial_address": "Phase 1, Hinjewadi",
        "owner_name": "Priyanka Joshi",
        "contact_phone": "9850123987",
        "description": "Managed co-living with gym access and weekly housekeeping.",
        "furnished_status": "Furnished",
        "amenities": ["AC", "WiFi", "Gym", "Housekeeping", "Power Backup"],
        "size": "Double Sharing",
        "images": ["https://placehold.co/600x400"],
        "views": 188,
        "owner_id": "owner-8",
        "broker_status": "Without Broker",
        "beds": [
            {"id": "D1", "status": "vacant"},
            {"id": "D2", "status": "occupied"},
        ],
    },
]

SEED_ROOMMATES: list[dict] = [
    {
        "id": "rm-1",
        "owner_name": "Aarav Mehta",
        "age": 26,
        "rent": 12000,
        "city": "Navi Mumbai",
        "locality": "Kharghar",
        "state": "Maharashtra",
        "complete_address": "Flat 1103, Hill View, Sector 35, Kharghar, Navi Mumbai 410210",
        "partial_address": "Sector 35, Kharghar",
        "contact_phone": "9004512345",
        "contact_email": "aarav.mehta@example.com",
        "description": "Software engineer looking for a flatmate for a 2BHK near the golf course.",
        "preferences": ["Non-smoker", "Vegetarian", "Early riser"],
        "gender": "Male",
        "images": ["https://placehold.co/400x400"],
        "views": 120,
        "owner_id": "user-1",
        "has_property": True,
    },
    {
        "id": "rm-2",
        "owner_name": "Sneha Iyer",
        "age": 24,
        "rent": 10000,
        "city": "Navi Mumbai",
        "locality": "Vashi",
        "state": "Maharashtra",
        "complete_address": "A-12, Green Acres, Sector 29, Vashi, Navi Mumbai 400703",
        "partial_address": "Sector 29, Vashi",
        "contact_phone": "9920456712",
        "description": "Designer sharing a furnished flat, prefers a quiet female flatmate.",
        "preferences": ["Non-smoker", "Pet friendly"],
        "gender": "Female",
        "images": ["https://placehold.co/400x400"],
        "views": 86,
        "owner_id": "user-2",
        "has_property": True,
    },
    {
        "id": "rm-3",
        "owner_name": "Rohit Verma",
        "age": 29,
        "rent": 15000,
        "city": "Mumbai",
        "locality": "Andheri",
        "state": "Maharashtra",
        "complete_address": "302, Lokhandwala Heights, Andheri West, Mumbai 400053",
        "partial_address": "Lokhandwala, Andheri",
        "contact_phone": "9819345678",
        "contact_email": "rohit.verma@example.com",
        "description": "Looking for someone to move in together; open to any locality in the western suburbs.",
        "preferences": ["Night owl", "Fitness enthusiast"],
        "gender": "Male",
        "images": ["https://placehold.co/400x400"],
        "views": 54,
        "owner_id": "user-3",
        "has_property": False,
    },
    {
        "id": "rm-4",
        "owner_name": "Kavya Nair",
        "age": 27,
        "rent": 22000,
        "city": "Bangalore",
        "locality": "Koramangala",
        "state": "Karnataka",
        "complete_address": "No. 14, 5th Block, Koramangala, Bangalore 560095",
        "partial_address": "5th Block, Koramangala",
        "contact_phone": "9845098765",
        "description": "Product manager with a spare room in a 3BHK, shared kitchen and balcony.",
        "preferences": ["Non-smoker", "Works from home"],
        "gender": "Female",
        "images": ["https://placehold.co/400x400"],
        "views": 143,
        "owner_id": "user-4",
        "has_property": True,
    },
]
