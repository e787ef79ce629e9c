"""tilechess — chess move enumeration with a small PyQt6 front end."""

__version__ = "0.1.0"
