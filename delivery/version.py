"""Calculator version, stamped on batch output."""

VERSION = "1.0.0"
