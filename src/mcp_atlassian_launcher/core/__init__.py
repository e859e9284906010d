"""Core launcher logic: runner detection, invocation building, supervision."""
