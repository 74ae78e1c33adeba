"""Diceware passphrase generation engine."""
