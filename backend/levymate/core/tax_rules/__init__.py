from levymate.core.tax_rules.pit import PITCalculator
from levymate.core.tax_rules.cit import CITCalculator
from levymate.core.tax_rules.bands import TaxBand, LEGACY_PIT_BANDS, PIT_BANDS_2026, apply_bands

__all__ = ["PITCalculator", "CITCalculator", "TaxBand", "LEGACY_PIT_BANDS", "PIT_BANDS_2026", "apply_bands"]
