"""Per-record value transforms applied between reading and writing."""
