#!/usr/bin/env python
"""
Seed the database with random records.

Usage:
    python gen.py [COUNT]
"""
import random
import sys

from app import create_app
from models import db
from store import RecordStore

RECORDS = 300

names = ["Ann", "Bo", "Carla", "Dmytro", "Elena", "Farid", "Grace", "Hiro", "Iryna", "Jonas"]
surnames = ["Lee", "Kim", "Novak", "Shevchenko", "Garcia", "Tanaka", "Okafor", "Berg", "Rossi", "Smith"]


def random_phone():
    return f"555-{random.randint(1000, 9999)}"


def seed(count):
    app = create_app()
    with app.app_context():
        db.create_all()
        store = RecordStore()
        for _ in range(count):
            store.insert(
                name=random.choice(names),
                surname=random.choice(surnames),
                age=random.randint(18, 90),
                phone_number=random_phone(),
            )
    print(f"✔ {count} records added")


if __name__ == '__main__':
    seed(int(sys.argv[1]) if len(sys.argv) > 1 else RECORDS)
