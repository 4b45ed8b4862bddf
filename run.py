#!/usr/bin/env python3
"""
CRM Prep - Entry Point

Usage:
    python run.py                          # Interactive mode
    python run.py process contacts.xlsx    # Format a file
    python run.py config                   # Show configuration status
    python run.py version                  # Show version
"""

import sys

from crmprep.cli import main

if __name__ == '__main__':
    sys.exit(main())
