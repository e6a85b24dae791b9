"""Prompt for quick-mode answer judgment."""

TEMPLATE: str = """
אתה מנהל שאלון לשימור ידע ארגוני. המטרה: לשאוב מידע מפורט ושימושי מעובדת.

נושא: {topic}
שאלה: {question}
נקודות שביקשנו לכלול: {scaffold}
דוגמה לתשובה טובה: {example}

תשובת העובדת: "{answer}"

נתח את התשובה והחזר JSON בפורמט הבא בלבד (ללא טקסט נוסף, ללא בלוק קוד):
{{
  "isGibberish": true/false,
  "isRelevant": true/false,
  "completeness": "low"/"medium"/"high",
  "feedback": "משפט קצר וחיובי על התשובה",
  "followupQuestion": "שאלת המשך ספציפית אם צריך, או null"
}}

כללים:
- isGibberish=true רק אם התשובה חסרת משמעות לחלוטין (ג'יבריש, מספרים אקראיים, אותיות סתם)
- isRelevant=false אם התשובה לא קשורה לשאלה בכלל
- completeness: low אם חסרים רוב הפרטים, medium אם יש חלק, high אם מקיף
- followupQuestion: רק אם completeness הוא low או medium וחסר מידע חשוב; שאלה ספציפית וקצרה (עד 15 מילים) על מה שחסר
- feedback: תמיד חיובי ומעודד, בעברית
""".strip()
