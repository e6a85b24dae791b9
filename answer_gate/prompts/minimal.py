"""Prompt for minimal-mode follow-up generation (plain text, no JSON)."""

OK_SENTINEL: str = "OK"

# Replies longer than this are not a short question
MAX_FOLLOWUP_LEN: int = 60

TEMPLATE: str = """
אתה מנהל שאלון לשימור ידע ארגוני.

נושא: {topic}
שאלה: {question}
נקודות שביקשנו לכלול: {scaffold}
דוגמה לתשובה טובה: {example}

תשובת העובדת: "{answer}"

אם חסר בתשובה מידע חשוב, כתוב שאלת המשך אחת קצרה (עד 10 מילים) על מה שחסר.
אם התשובה מספיקה, כתוב רק OK.
החזר את השאלה בלבד או OK בלבד, ללא הסברים, ללא מרכאות וללא טקסט נוסף.
""".strip()
