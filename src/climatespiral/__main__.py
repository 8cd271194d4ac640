"""
Run with: python -m climatespiral [path/to/anomalies.csv]
"""
from climatespiral.main import main

if __name__ == "__main__":
    main()
