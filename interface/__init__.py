"""Text front end for the Ataxx engine."""
