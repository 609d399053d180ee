from .metadata_resolution import MetadataResolver, best_match, classify_person

__all__ = ["MetadataResolver", "best_match", "classify_person"]
