"""Command-line entry point: python -m rosebouquet"""
from rosebouquet.main import main

if __name__ == "__main__":
    main()
