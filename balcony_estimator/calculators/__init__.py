"""
Tab calculators — the quantity and cost rules.

Deterministic, no I/O beyond the injected MaterialLookup.
Given a tab's form data, produce the bill of materials and its total cost.
"""
