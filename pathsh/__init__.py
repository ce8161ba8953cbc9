"""pathsh - a small line-oriented shell with a configurable search path."""
