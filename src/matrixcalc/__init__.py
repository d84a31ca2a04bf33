"""Interactive, keyboard-driven linear-algebra calculator."""
