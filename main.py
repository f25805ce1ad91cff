#!/usr/bin/env python3
"""
Dice Collection - roll a set of dice and chart the distribution of their sums
"""

from dicecollection.cli.__main__ import main


if __name__ == '__main__':
    main()
