"""Command-line entry point: python -m samplecollector"""
import sys

from samplecollector.app.main import main

if __name__ == "__main__":
    sys.exit(main())
