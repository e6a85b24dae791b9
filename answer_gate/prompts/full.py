"""Prompt for full-mode answer judgment, with relevance anchoring examples."""

from pathlib import Path

EXAMPLES_PATH = Path(__file__).parent / "relevance_examples.yaml"

TEMPLATE: str = """
אתה בודק איכות בשאלון לשימור ידע ארגוני. עובדת ותיקה עונה על שאלות כדי שהידע שלה יישמר לעובדים הבאים.
עליך להחליט אם התשובה רלוונטית לשאלה, אם יש בה תוכן שימושי, ועד כמה היא מכסה את הנקודות המבוקשות.

נושא: {topic}
שאלה: {question}
נקודות שביקשנו לכלול: {scaffold}
דוגמה לתשובה טובה: {example}

תשובת העובדת: "{answer}"

מה נחשב "רלוונטי" - דוגמאות:
{relevance_examples}

החזר JSON בפורמט הבא בלבד (ללא טקסט נוסף, ללא בלוק קוד):
{{
  "isRelevant": true/false,
  "relevanceReason": "משפט קצר שמסביר למה התשובה רלוונטית או לא",
  "hasContent": true/false,
  "completeness": "none"/"low"/"medium"/"high",
  "missingPoints": ["נקודה חסרה", "..."],
  "feedback": "משפט קצר וחיובי על התשובה",
  "followupQuestion": "שאלת המשך ספציפית, או null"
}}

כללים:
- isRelevant=false אם התשובה עוסקת בנושא אחר, גם אם היא ארוכה ומפורטת
- hasContent=false אם התשובה כללית מדי, ריקה מתוכן או רק מנומסת ("הכל בסדר", "כרגיל")
- isRelevant ו-hasContent הם סימן הקבלה: תשובה מתקבלת רק אם שניהם true
- completeness: none אם אין תוכן, low אם חסרים רוב הפרטים, medium אם יש חלק, high אם מקיף
- missingPoints: רק נקודות מהרשימה שלמעלה שלא כוסו; רשימה ריקה אם אין
- followupQuestion: רק אם completeness הוא low או medium; שאלה אחת קצרה (עד 15 מילים) על מה שחסר
- feedback: תמיד חיובי ומעודד, בעברית
""".strip()
