from adapters.cache.translation_cache import CacheEntry, TranslationCache

__all__ = ["CacheEntry", "TranslationCache"]
