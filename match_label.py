"""
Parcel Label Matching Tool

Main entry point for matching OCR text from parcel labels
against a reference table of recipients.

This is a convenience wrapper that calls the main CLI function.
"""

if __name__ == "__main__":
    # Import and run the main CLI function
    # Local imports
    from parcel_match.adapters.cli.main import main

    raise SystemExit(main())
