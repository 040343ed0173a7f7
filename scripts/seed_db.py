import sys

from recipe_api.config import configure_logging
from recipe_api.db import SessionLocal, engine
from recipe_api.recipes import DEFAULT_SEED_FILE
from recipe_api.seed import seed_database


def main():
    configure_logging()
    path = sys.argv[1] if len(sys.argv) > 1 else DEFAULT_SEED_FILE
    db = SessionLocal()
    try:
        categories, recipes = seed_database(engine, db, path)
    finally:
        db.close()
    print(f'Seeded {categories} categories and {recipes} recipes')


if __name__ == '__main__':
    main()
