"""
Value Added Tax (VAT) helpers
Based on Nigeria Tax Act 2025, Chapter 6, Section 148

VAT Rate: 7.5% on taxable supplies

Key provisions:
  - Section 148: Rate of VAT (7.5%)
  - Section 156: Credit for input tax and remission of VAT

Output VAT is charged on turnover (all treated as standard-rated).
Input VAT is recovered from VAT-inclusive purchase amounts, so it has to be
extracted by reversing the gross-up: amount * 7.5 / 107.5.
"""

VAT_RATE = 0.075


def extract_vat_from_inclusive(inclusive_amount: float) -> float:
    return inclusive_amount * VAT_RATE / (1 + VAT_RATE)


def output_vat(turnover: float) -> float:
    return turnover * VAT_RATE


def vat_payable(vat_output: float, input_vat: float) -> float:
    return max(0.0, vat_output - input_vat)
