from .store import DEFAULT_LANGUAGE, RESULTS_DEFAULT, LocalizationStore

__all__ = ["DEFAULT_LANGUAGE", "RESULTS_DEFAULT", "LocalizationStore"]
