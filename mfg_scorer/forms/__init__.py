"""
Form state handling for UI layers (dashboard, CLI prompts).

Modules
-------
session : apply_change() + rederive_utilization() + FormSession — immutable
          form state with explicit utilization recompute.
"""
