"""Coding core: tree construction, code tables, bit packing, wire format."""
