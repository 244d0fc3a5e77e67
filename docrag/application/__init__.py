"""Application services coordinating core and boundary components."""
