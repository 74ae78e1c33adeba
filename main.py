#!/usr/bin/env python3
"""
Passphraser - Diceware passphrase generator
"""

from passphraser.cli.__main__ import main


if __name__ == '__main__':
    main()
