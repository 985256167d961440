"""HTTP surface of the messagely service."""
