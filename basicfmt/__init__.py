# basicfmt/__init__.py
# Line-number aware formatting, indentation & renumbering for BASIC source

__version__ = "0.1.0"
