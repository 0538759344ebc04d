"""
Display strings for recommendation labels, English and Greek.
"""

TRANSLATIONS: dict[str, dict[str, dict[str, str]]] = {
    "en": {
        "priorities": {
            "critical": "Critical",
            "high": "High Priority",
            "medium": "Medium Priority",
            "low": "Low Priority",
        },
        "effort": {
            "quick": "Quick Fix (< 30 min)",
            "moderate": "Moderate Effort (30 min - 2 hrs)",
            "significant": "Significant Work (> 2 hrs)",
        },
        "impact": {
            "score": "Potential Score Increase",
            "ranking": "Expected Ranking Impact",
        },
        "categories": {
            "meta": "Meta Tags",
            "content": "Content Quality",
            "technical": "Technical SEO",
            "readability": "Readability",
            "keywords": "Keywords",
        },
    },
    "el": {
        "priorities": {
            "critical": "Κρίσιμο",
            "high": "Υψηλή Προτεραιότητα",
            "medium": "Μέτρια Προτεραιότητα",
            "low": "Χαμηλή Προτεραιότητα",
        },
        "effort": {
            "quick": "Γρήγορη Διόρθωση (< 30 λεπτά)",
            "moderate": "Μέτρια Προσπάθεια (30 λεπτά - 2 ώρες)",
            "significant": "Σημαντική Εργασία (> 2 ώρες)",
        },
        "impact": {
            "score": "Πιθανή Αύξηση Βαθμολογίας",
            "ranking": "Αναμενόμενος Αντίκτυπος στην Κατάταξη",
        },
        "categories": {
            "meta": "Ετικέτες Meta",
            "content": "Ποιότητα Περιεχομένου",
            "technical": "Τεχνικό SEO",
            "readability": "Αναγνωσιμότητα",
            "keywords": "Λέξεις-κλειδιά",
        },
    },
}

DEFAULT_LANGUAGE = "en"
