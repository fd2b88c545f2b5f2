"""Komendy CLI vn3sum (po jednym module na komendę)."""
