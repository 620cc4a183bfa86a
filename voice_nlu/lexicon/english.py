"""
English lexicon tables (en-US, en-GB).

Canonical forms are American restaurant English: British and informal
dialect terms map onto them, and the shared tables (food, common vocabulary,
phonetic corrections) only ever produce canonical forms.
"""

LANGUAGE = "en"
DEFAULT_VARIANT = "en-US"

# Divisor for the saturating length bonus in intent confidence
CONFIDENCE_LENGTH_DIVISOR = 12


# =============================================================================
# Normalization
# =============================================================================

# (regex, replacement) pairs applied to lower-cased text before punctuation
# is stripped, so patterns may rely on the trailing period.
ABBREVIATIONS = [
    (r"\s*&\s*", " and "),
    (r"(?<!\w)etc\.", "et cetera"),
    (r"(?<!\w)vs\.", "versus"),
    (r"(?<!\w)e\.g\.", "for example"),
    (r"(?<!\w)i\.e\.", "that is"),
    (r"(?<!\w)dr\.?\s+pepper(?!\w)", "dr pepper"),
    (r"(?<!\w)mr\.", "mister"),
    (r"(?<!\w)mrs\.", "missus"),
    (r"(?<!\w)ms\.", "miss"),
    (r"(?<!\w)dr\.", "doctor"),
    (r"\$\s*(\d+(?:\.\d+)?)", r"\1 dollars"),
]


# =============================================================================
# Regional Dialect Mappings
# =============================================================================

_INFORMAL_SPEECH = {
    "gonna": "going to",
    "wanna": "want to",
    "gotta": "got to",
    "dunno": "do not know",
    "lemme": "let me",
    "gimme": "give me",
    "kinda": "kind of",
    "sorta": "sort of",
}

REGIONAL_MAPPINGS = {
    "en-US": {
        **_INFORMAL_SPEECH,
        "hafta": "have to",
        "shoulda": "should have",
        "coulda": "could have",
        "woulda": "would have",
        "whatcha": "what are you",
        "gotcha": "got you",
        "lotta": "lot of",
        "outta": "out of",
        "y'all": "you all",
        "ain't": "is not",
        # American food terminology
        "fries": "french fries",
        "chips": "french fries",
        "potato chips": "potato chips",
        "tortilla chips": "tortilla chips",
        "corn chips": "corn chips",
        "chocolate chips": "chocolate chips",
        "fish and chips": "fish and chips",
        "soda pop": "soda",
        "pop": "soda",
        "hoagie": "sub sandwich",
        "grinder": "sub sandwich",
        "torpedo": "sub sandwich",
        "to go": "takeout",
        "take out": "takeout",
    },
    "en-GB": {
        **_INFORMAL_SPEECH,
        "innit": "is it not",
        "cheers": "thank you",
        "ta": "thank you",
        "quid": "pounds",
        "cuppa": "cup of tea",
        "brekkie": "breakfast",
        # British food terminology mapped to the American canonical forms
        "chips": "french fries",
        "fish and chips": "fish and chips",
        "crisps": "potato chips",
        "biscuit": "cookie",
        "biscuits": "cookies",
        "sweets": "candy",
        "candy floss": "cotton candy",
        "ice lolly": "popsicle",
        "takeaway": "takeout",
        "bill": "check",
        "starter": "appetizer",
        "starters": "appetizers",
        "mains": "main courses",
        "pudding": "dessert",
        "afters": "dessert",
        "coriander": "cilantro",
        "rocket": "arugula",
        "courgette": "zucchini",
        "courgettes": "zucchini",
        "aubergine": "eggplant",
        "prawns": "shrimp",
        "prawn": "shrimp",
        "mince": "ground beef",
        "rashers": "bacon strips",
        "bangers": "sausages",
        "jacket potato": "baked potato",
        "full english": "full english breakfast",
        "beans on toast": "baked beans on toast",
        "sarnie": "sandwich",
        "butty": "sandwich",
        "fizzy drink": "soft drink",
        "squash": "fruit cordial",
        "single cream": "light cream",
        "double cream": "heavy cream",
    },
}


# =============================================================================
# Slang & Informal Corrections
# =============================================================================

SLANG_TERMS = {
    "yeah": "yes",
    "yep": "yes",
    "yup": "yes",
    "uh huh": "yes",
    "mm hmm": "yes",
    "nah": "no",
    "nope": "no",
    "awesome": "great",
    "dope": "good",
    "legit": "legitimate",
    "totes": "totally",
    "obvs": "obviously",
    "whatevs": "whatever",
    "prolly": "probably",
    "perf": "perfect",
    "lowkey": "somewhat",
    "highkey": "definitely",
    "no cap": "no lie",
    "bougie": "fancy",
    "boujee": "fancy",
    "homie": "friend",
    "pls": "please",
    "plz": "please",
    "thx": "thank you",
}


# =============================================================================
# Domain Food & Drink Vocabulary
# =============================================================================

FOOD_TERMS = {
    # Appetizers
    "appetizer": "appetizer",
    "nachos": "nachos",
    "wings": "chicken wings",
    "chicken wings": "chicken wings",
    "buffalo wings": "buffalo wings",
    "mozzarella sticks": "mozzarella sticks",
    "onion rings": "onion rings",
    "garlic bread": "garlic bread",
    "breadsticks": "breadsticks",
    "shrimp cocktail": "shrimp cocktail",
    "calamari": "calamari",
    "bruschetta": "bruschetta",
    "stuffed mushrooms": "stuffed mushrooms",
    "deviled eggs": "deviled eggs",
    # Soups & salads
    "soup": "soup",
    "chicken soup": "chicken soup",
    "tomato soup": "tomato soup",
    "onion soup": "french onion soup",
    "clam chowder": "clam chowder",
    "minestrone": "minestrone",
    "salad": "salad",
    "caesar salad": "caesar salad",
    "greek salad": "greek salad",
    "garden salad": "garden salad",
    "house salad": "house salad",
    "cobb salad": "cobb salad",
    "potato salad": "potato salad",
    "coleslaw": "coleslaw",
    "slaw": "coleslaw",
    # Meat
    "steak": "steak",
    "ribeye": "ribeye steak",
    "filet mignon": "filet mignon",
    "sirloin": "sirloin steak",
    "t-bone": "t-bone steak",
    "roast beef": "roast beef",
    "prime rib": "prime rib",
    "brisket": "brisket",
    "short ribs": "short ribs",
    "meatloaf": "meatloaf",
    "meatballs": "meatballs",
    "pork chops": "pork chops",
    "ribs": "ribs",
    "baby back ribs": "baby back ribs",
    "pulled pork": "pulled pork",
    "bacon": "bacon",
    "ham": "ham",
    "sausage": "sausage",
    "chicken": "chicken",
    "fried chicken": "fried chicken",
    "grilled chicken": "grilled chicken",
    "chicken breast": "chicken breast",
    "chicken parmesan": "chicken parmesan",
    "chicken tenders": "chicken tenders",
    "nuggets": "chicken nuggets",
    "chicken nuggets": "chicken nuggets",
    "turkey": "turkey",
    # Burgers & sandwiches
    "burger": "hamburger",
    "hamburger": "hamburger",
    "cheeseburger": "cheeseburger",
    "bacon burger": "bacon burger",
    "turkey burger": "turkey burger",
    "veggie burger": "veggie burger",
    "hot dog": "hot dog",
    "sandwich": "sandwich",
    "sub sandwich": "sub sandwich",
    "blt": "bacon lettuce and tomato sandwich",
    "grilled cheese": "grilled cheese sandwich",
    "club sandwich": "club sandwich",
    # Seafood
    "fish": "fish",
    "salmon": "salmon",
    "tuna": "tuna",
    "cod": "cod",
    "halibut": "halibut",
    "shrimp": "shrimp",
    "lobster": "lobster",
    "crab cakes": "crab cakes",
    "scallops": "scallops",
    "oysters": "oysters",
    "mussels": "mussels",
    "fish and chips": "fish and chips",
    "sushi": "sushi",
    # Pasta & pizza
    "pasta": "pasta",
    "spaghetti": "spaghetti",
    "fettuccine": "fettuccine",
    "penne": "penne",
    "ravioli": "ravioli",
    "lasagna": "lasagna",
    "mac and cheese": "macaroni and cheese",
    "macaroni and cheese": "macaroni and cheese",
    "pizza": "pizza",
    "margherita pizza": "margherita pizza",
    "pepperoni pizza": "pepperoni pizza",
    "veggie pizza": "vegetarian pizza",
    "hawaiian pizza": "hawaiian pizza",
    "deep dish": "deep dish pizza",
    "thin crust": "thin crust pizza",
    # Mexican & Asian
    "tacos": "tacos",
    "burritos": "burritos",
    "burrito": "burrito",
    "quesadillas": "quesadillas",
    "quesadilla": "quesadilla",
    "enchiladas": "enchiladas",
    "fajitas": "fajitas",
    "guacamole": "guacamole",
    "salsa": "salsa",
    "pad thai": "pad thai",
    "fried rice": "fried rice",
    "lo mein": "lo mein",
    "chow mein": "chow mein",
    "general tso": "general tso's chicken",
    "orange chicken": "orange chicken",
    # Sides
    "fries": "french fries",
    "french fries": "french fries",
    "sweet potato fries": "sweet potato fries",
    "curly fries": "curly fries",
    "tater tots": "tater tots",
    "mashed potatoes": "mashed potatoes",
    "baked potato": "baked potato",
    "rice": "rice",
    "vegetables": "vegetables",
    "veggies": "vegetables",
    "steamed vegetables": "steamed vegetables",
    "broccoli": "broccoli",
    "green beans": "green beans",
    "corn on the cob": "corn on the cob",
    "side salad": "side salad",
    # Desserts
    "dessert": "dessert",
    "cake": "cake",
    "chocolate cake": "chocolate cake",
    "cheesecake": "cheesecake",
    "apple pie": "apple pie",
    "pecan pie": "pecan pie",
    "ice cream": "ice cream",
    "vanilla ice cream": "vanilla ice cream",
    "chocolate ice cream": "chocolate ice cream",
    "sundae": "sundae",
    "milkshake": "milkshake",
    "shake": "milkshake",
    "cookies": "cookies",
    "brownie": "brownie",
    "brownies": "brownies",
    "tiramisu": "tiramisu",
    "crème brûlée": "crème brûlée",
    "sorbet": "sorbet",
    # Beverages
    "water": "water",
    "sparkling water": "sparkling water",
    "soda": "soda",
    "soft drink": "soft drink",
    "cola": "cola",
    "coke": "coca cola",
    "diet coke": "diet coca cola",
    "pepsi": "pepsi",
    "sprite": "sprite",
    "dr pepper": "dr pepper",
    "root beer": "root beer",
    "lemonade": "lemonade",
    "iced tea": "iced tea",
    "sweet tea": "sweet tea",
    "hot tea": "hot tea",
    "green tea": "green tea",
    "coffee": "coffee",
    "decaf": "decaf coffee",
    "iced coffee": "iced coffee",
    "espresso": "espresso",
    "cappuccino": "cappuccino",
    "latte": "latte",
    "americano": "americano",
    "mocha": "mocha",
    "hot chocolate": "hot chocolate",
    "juice": "juice",
    "orange juice": "orange juice",
    "apple juice": "apple juice",
    "oj": "orange juice",
    "beer": "beer",
    "wine": "wine",
    "red wine": "red wine",
    "white wine": "white wine",
    "rosé": "rosé wine",
    "champagne": "champagne",
    "margarita": "margarita",
    "mojito": "mojito",
    "martini": "martini",
}

# Substring keywords per category, checked in order against the canonical name
# padded with spaces (a leading or trailing space anchors a keyword to a word edge).
FOOD_CATEGORY_KEYWORDS = [
    ("beverage", (
        "water", "soda", "soft drink", " cola", "pepsi", "sprite", "dr pepper",
        "root beer", "lemonade", "juice", " tea ", "coffee", "espresso",
        "cappuccino", "latte", "americano", "mocha", "hot chocolate", "beer",
        "wine", "champagne", "margarita", "mojito", "martini", "milkshake",
    )),
    ("dessert", (
        "cake", " pie ", "ice cream", "dessert", "cookie", "brownie", "sundae",
        "tiramisu", "crème brûlée", "sorbet",
    )),
    ("appetizer", (
        "salad", "soup", "chowder", "minestrone", "appetizer", "nachos", "wings",
        "mozzarella sticks", "onion rings", "garlic bread", "breadsticks",
        "calamari", "bruschetta", "stuffed mushrooms", "deviled eggs", "coleslaw",
    )),
    ("meat", (
        "beef", "chicken", "pork", "turkey", "steak", "filet mignon", "prime rib",
        "brisket", "ribs", "meatloaf", "meatballs", " ham ", "bacon", "sausage",
    )),
    ("seafood", (
        "fish", "salmon", "tuna", " cod ", "halibut", "shrimp", "lobster", "crab",
        "scallops", "oysters", "mussels", "sushi",
    )),
    ("main_course", (
        "pasta", "spaghetti", "fettuccine", "penne", "ravioli", "lasagna",
        "macaroni", "pizza", "burger", "hot dog", "sandwich", "tacos", "burrito",
        "quesadilla", "enchiladas", "fajitas", "pad thai", "lo mein", "chow mein",
    )),
    ("side", (
        "fries", "rice", "vegetables", "potato", "broccoli", "green beans",
        "corn", "tater tots", "side salad",
    )),
]

# Canonical names whose keyword category would be misleading
FOOD_CATEGORY_OVERRIDES = {
    "shrimp cocktail": "appetizer",
    "crab cakes": "appetizer",
    "side salad": "side",
    "potato salad": "side",
    "pepperoni pizza": "main_course",
    "bacon burger": "main_course",
    "turkey burger": "main_course",
    "bacon lettuce and tomato sandwich": "main_course",
}


# =============================================================================
# Common Restaurant Vocabulary
# =============================================================================

COMMON_WORDS = {
    "thanks": "thank you",
    "thank u": "thank you",
    "yummy": "delicious",
    "appetiser": "appetizer",
    "appetisers": "appetizers",
    "apps": "appetizers",
    "entree": "main course",
    "entrée": "main course",
    "entrees": "main courses",
    "bev": "beverage",
    "bevs": "beverages",
    "kids meal": "children's meal",
    "kid's meal": "children's meal",
    "combo": "combo meal",
    "doggy bag": "takeout box",
    "togo": "takeout",
}


# =============================================================================
# Phonetic Error Corrections (substring-level)
# =============================================================================

PHONETIC_REPLACEMENTS = {
    "expresso": "espresso",
    "capuccino": "cappuccino",
    "cappucino": "cappuccino",
    "machiato": "macchiato",
    "chipolte": "chipotle",
    "bruscheta": "bruschetta",
    "gnocci": "gnocchi",
    "foccacia": "focaccia",
    "caeser": "caesar",
    "ceasar": "caesar",
    "bolognaise": "bolognese",
    "perogies": "pierogies",
    "mozarella": "mozzarella",
    "parmasan": "parmesan",
    "tirimisu": "tiramisu",
    "jalepeno": "jalapeno",
    "calimari": "calamari",
    "burguer": "burger",
    "crossant": "croissant",
    "sherbert": "sherbet",
    "definately": "definitely",
    "probly": "probably",
    "seperate": "separate",
    "recieve": "receive",
    "irregardless": "regardless",
    "everytime": "every time",
    "soder": "soda",
}


# =============================================================================
# Intent Taxonomy
# =============================================================================

# intent -> (localized label, trigger phrases), in priority order
INTENT_TRIGGERS = {
    "order": ("order", [
        "order", "i would like", "i want", "i will have", "we will have",
        "can i get", "could i have", "may i have", "can i have", "give me",
        "bring me", "i will take",
    ]),
    "add": ("add", ["also", "and", "plus", "with", "add", "extra", "more", "additional"]),
    "remove": ("remove", ["without", "no", "remove", "take off", "hold", "skip", "omit"]),
    "change": ("change", [
        "change", "substitute", "replace", "switch", "instead of", "rather than",
    ]),
    "pay": ("pay", ["pay", "bill", "check", "tab", "receipt", "how much", "total", "cost"]),
    "help": ("help", [
        "help", "what is", "recommend", "suggest", "what is good", "explain",
        "tell me about",
    ]),
    "repeat": ("repeat", [
        "repeat", "again", "come again", "say that again", "pardon", "excuse me",
    ]),
    "cancel": ("cancel", [
        "cancel", "stop", "never mind", "forget it", "scratch that", "actually",
    ]),
}

# Words whose presence marks a well-formed sentence for the confidence bonus
STRUCTURE_WORDS = [
    "a", "an", "the",
    "can", "could", "may", "might", "will", "would", "shall", "should", "must",
    "am", "is", "are", "was", "were", "have", "has", "had", "do", "does", "did",
]


# =============================================================================
# Numerals
# =============================================================================

NUMBER_UNITS = {
    "zero": 0, "one": 1, "two": 2, "three": 3, "four": 4, "five": 5,
    "six": 6, "seven": 7, "eight": 8, "nine": 9, "ten": 10,
    "eleven": 11, "twelve": 12, "thirteen": 13, "fourteen": 14,
    "fifteen": 15, "sixteen": 16, "seventeen": 17, "eighteen": 18,
    "nineteen": 19, "twenty": 20, "thirty": 30, "forty": 40, "fifty": 50,
    "sixty": 60, "seventy": 70, "eighty": 80, "ninety": 90,
}

NUMBER_MULTIPLIERS = {"hundred": 100, "thousand": 1000}

# article -> whether it can stand for "one" inside a compound
NUMBER_ARTICLES = {"a": False, "an": False}

# Nouns after which a bare article means "one"
ARTICLE_NOUNS = ["dozen", "hundred", "thousand", "million", "billion"]

# connector -> rule; "and" only joins after hundred/thousand
NUMBER_CONNECTORS = {"and": {"after": "multiplier"}}

# "sixty ten" is not English; teens never follow a tens word
COMPOUND_TEENS = False

# Names whose number words are never converted
NUMERAL_IDIOMS = ["seven up", "thousand island"]


# =============================================================================
# Entity Vocabularies
# =============================================================================

MODIFIERS = ["with", "without", "extra", "on the side", "add", "no", "light", "double"]

SIZES = ["small", "medium", "large", "extra large", "regular", "jumbo", "king size"]

COOKING_METHODS = [
    "grilled", "fried", "deep fried", "pan fried", "baked", "roasted",
    "steamed", "sautéed", "broiled", "blackened", "cajun", "smoked",
    "rare", "medium rare", "well done",
]


# =============================================================================
# Proper Nouns (display forms)
# =============================================================================

PROPER_NOUNS = [
    "Coca Cola", "Diet Coca Cola", "Pepsi", "Sprite", "Dr Pepper", "Mountain Dew", "Fanta",
    "McDonald's", "Burger King", "KFC", "Taco Bell", "Pizza Hut", "Domino's",
    "Starbucks", "Dunkin", "Caesar", "Hawaiian", "General Tso's",
    "New York", "California", "Texas", "Chicago", "Philadelphia",
]
