"""Run with: python -m fractalgui"""
from fractalgui.main import main

if __name__ == "__main__":
    main()
