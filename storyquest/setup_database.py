"""
Quick database initialization script.
Run this to create all tables and seed the demo data.
"""
import sys
import traceback


def main():
    print("=" * 70)
    print("StoryQuest - Database Setup")
    print("=" * 70)

    # Step 1: Create tables
    print("\n[Step 1/2] Creating database tables...")
    try:
        from storyquest.shared.services.orm_service import init_db
        init_db()
        print("Database tables created successfully")
    except Exception as e:
        print(f"Error creating tables: {e}")
        sys.exit(1)

    # Step 2: Seed data
    print("\n[Step 2/2] Seeding demo data...")
    try:
        from storyquest.seed_data import seed_all, DEMO_EMAIL, DEMO_PASSWORD
        seed_all()
        print("Demo data seeded successfully")
    except Exception as e:
        print(f"Error seeding data: {e}")
        traceback.print_exc()
        sys.exit(1)

    print("\n" + "=" * 70)
    print("Database setup complete!")
    print("=" * 70)
    print("\nDemo login credentials:")
    print(f"  Email:    {DEMO_EMAIL}")
    print(f"  Password: {DEMO_PASSWORD}")
    print("\nNext steps:")
    print("  1. Start API server: python -m storyquest.main")
    print("=" * 70)


if __name__ == "__main__":
    main()
