"""Command-line interface."""
from matrixcalc.main import main

if __name__ == "__main__":
    main()
