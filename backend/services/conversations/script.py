"""Fixed script for the health insurance inquiry"""

START_ANNOUNCEMENT = "Start health insurance inquiry."
GREETING = "Hello! Let's begin."
OPEN_ENDED_NOTICE = "We've already covered the basics. Ask me anything about your health insurance options."

QUESTIONS = [
    "Are you looking for a health insurance plan?",
    "What is your family size?",
    "What is your household income?",
    "What is your gender?",
]
