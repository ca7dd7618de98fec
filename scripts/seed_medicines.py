#!/usr/bin/env python3
"""
Seed the medicines collection with a small demo catalog.
Does nothing if the collection already has documents.

Usage: python scripts/seed_medicines.py
"""

import sys
from datetime import datetime, timezone
from pathlib import Path

# Add project root to path
project_dir = Path(__file__).parent.parent
sys.path.insert(0, str(project_dir))

from core import database
from models import MEDICINES

DEMO_MEDICINES = [
    {"name": "Paracetamol 500mg", "category": "pain-relief", "price": 2.5, "stock": 200,
     "description": "Fever and mild pain relief"},
    {"name": "Ibuprofen 400mg", "category": "pain-relief", "price": 4.0, "stock": 120,
     "description": "Anti-inflammatory pain relief"},
    {"name": "Amoxicillin 250mg", "category": "antibiotic", "price": 9.75, "stock": 60,
     "description": "Prescription antibiotic"},
    {"name": "Cetirizine 10mg", "category": "allergy", "price": 3.2, "stock": 90,
     "description": "Antihistamine for allergy symptoms"},
    {"name": "ORS Sachet", "category": "hydration", "price": 1.0, "stock": 500,
     "description": "Oral rehydration salts"},
]

def seed():
    database.init_db()
    try:
        if not database.ping_db():
            print("❌ Database not reachable, check MONGODB_URI")
            return 1

        collection = database.get_database()[MEDICINES]
        if collection.count_documents({}) > 0:
            print("✅ Medicines already seeded")
            return 0

        now = datetime.now(timezone.utc)
        result = collection.insert_many([{**m, "image": None, "createdAt": now} for m in DEMO_MEDICINES])
        print(f"✅ Inserted {len(result.inserted_ids)} medicines")
        return 0
    finally:
        database.close_db()

if __name__ == "__main__":
    sys.exit(seed())
