"""Core domain logic: chunking, retrieval orchestration, registry, errors."""
