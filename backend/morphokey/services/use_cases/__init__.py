from morphokey.services.use_cases.analyze import AnalyzeTextUseCase

__all__ = ["AnalyzeTextUseCase"]
