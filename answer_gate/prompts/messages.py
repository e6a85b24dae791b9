"""Fixed worker-facing messages. All of them are shown as-is in the questionnaire UI."""

# Local prefilter hit
GIBBERISH_FEEDBACK: str = "נראה שהתשובה לא מלאה. נסי לענות בהתאם לנקודות שמופיעות למעלה."

# Judgment unavailable or unreadable
THANKS_FEEDBACK: str = "תודה על התשובה!"

# Judgment replied without feedback
DEFAULT_FEEDBACK: str = "תודה!"

EMPTY_ANSWER_FEEDBACK: str = "התשובה קצרה או כללית מדי. נסי להוסיף פרטים מהעבודה שלך בפועל."

IRRELEVANT_FEEDBACK: str = "תודה! נראה שהתשובה עוסקת בנושא אחר. נשמח אם תעני על השאלה שלמעלה."

IRRELEVANT_REASON_FALLBACK: str = "התשובה לא קשורה לשאלה"

NOT_SPECIFIED: str = "לא צוין"
