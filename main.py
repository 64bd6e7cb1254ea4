#!/usr/bin/env python3
"""
YC Company Scraper

Reads company names and YC URLs from a CSV file, visits each page in a
headless browser, extracts name, team size, job count and founders, and
writes the results to a JSON file.

Equivalent to `python cli.py run` with settings taken from the environment.
"""

import sys

import cli


def main():
    sys.argv = [sys.argv[0], "run", *sys.argv[1:]]
    cli.main()


if __name__ == '__main__':
    main()
