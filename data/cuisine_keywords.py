"""Static lookup tables used to classify foods by regional cuisine.

Matching is a case-insensitive substring test against the food name, so the
lists contain both dish names and common ingredients.
"""

INDIAN_KEYWORDS = (
    "dal", "roti", "chapati", "naan", "paratha", "idli", "dosa", "upma", "poha",
    "paneer", "curry", "biryani", "pulao", "khichdi", "sambar", "rasam", "raita",
    "chutney", "pakora", "samosa", "bajra", "jowar", "makki", "besan", "thepla",
    "bhakri", "missi", "kulcha", "poori", "luchi", "akki", "rajma", "chole",
    "kadhi", "korma", "tikka", "tandoori", "kebab", "bhurji", "palak", "kadai",
    "malai", "shahi", "matar", "pav", "vada", "uttapam", "appam", "pongal",
    "bisi bele", "curd", "ghee", "lassi", "kheer", "halwa", "ladoo", "parantha",
    "aloo", "gobi", "bhindi", "baingan", "masoor", "moong", "toor", "chana",
    "urad", "kabuli", "chana dal", "moong dal", "masoor dal", "toor dal",
    "rice", "chawal", "bread", "milk", "dahi", "vegetable", "sabzi", "sabji",
    "chicken", "fish", "mutton", "lentil", "bean", "potato", "tomato", "onion",
    "spinach", "masala", "gravy", "bhaji", "subzi", "phulka", "papad", "pickle",
    "achar", "puri", "tadka", "jeera", "zeera", "parota", "rumali",
    "tandoor", "chaat", "bhel", "papdi", "seviyan", "vermicelli", "papadum",
    "atta", "wheat", "methi", "fenugreek", "cabbage", "cauliflower", "brinjal",
    "okra", "carrot", "radish", "beetroot", "dhania", "coriander", "haldi",
    "turmeric", "garam", "namkeen", "murabba", "pilaf",
)

CONTINENTAL_KEYWORDS = (
    "pasta", "pizza", "burger", "sandwich", "wrap", "bagel", "croissant",
    "muffin", "ciabatta", "focaccia", "brioche", "sourdough", "quinoa",
    "couscous", "risotto", "salad", "soup", "grilled", "baked", "toast",
    "pancake", "waffle", "omelette", "bacon", "salmon", "tuna", "steak",
    "burrito", "taco", "hummus", "falafel", "avocado", "smoothie", "muesli",
    "oatmeal", "cereal", "yogurt", "parmesan", "feta", "mozzarella",
)
