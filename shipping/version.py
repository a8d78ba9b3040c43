"""Calculator version, stamped on every calculated shipment."""

VERSION = "2026.10.16"
