"""mdlinkcheck - check markdown documents for dead hyperlinks."""
