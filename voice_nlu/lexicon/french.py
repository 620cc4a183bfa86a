"""
French lexicon tables (fr-FR, fr-CH).

Swiss and Belgian numerals (septante, huitante, octante, nonante) are part of
the shared numeral vocabulary rather than the fr-CH dialect table: a Geneva
customer ordering in a Paris kiosk should still be understood, and the
numeral stage turns them straight into digits.
"""

LANGUAGE = "fr"
DEFAULT_VARIANT = "fr-FR"

CONFIDENCE_LENGTH_DIVISOR = 15


# =============================================================================
# Normalization
# =============================================================================

ABBREVIATIONS = [
    (r"\s*&\s*", " et "),
    (r"(?<!\w)etc\.", "et cetera"),
    (r"(?<!\w)mme\.?(?!\w)", "madame"),
    (r"(?<!\w)mlle\.?(?!\w)", "mademoiselle"),
    (r"(?<!\w)m\.(?=\s|$)", "monsieur"),
    (r"(\d+(?:[.,]\d+)?)\s*€", r"\1 euros"),
    (r"€", "euros"),
    (r"(?<!\w)eur(?!\w)", "euros"),
    (r"(?<!\w)chf(?!\w)", "francs"),
]


# =============================================================================
# Regional Dialect Mappings
# =============================================================================

_INFORMAL_SPEECH = {
    "j'suis": "je suis",
    "chuis": "je suis",
    "j'veux": "je veux",
    "j'peux": "je peux",
    "j'dois": "je dois",
    "j'vais": "je vais",
    "j'sais pas": "je ne sais pas",
    "chais pas": "je ne sais pas",
    "y'a": "il y a",
    "t'es": "tu es",
    "t'as": "tu as",
    "m'sieur": "monsieur",
    "m'dame": "madame",
    "p'tit": "petit",
    "p'tite": "petite",
    "ouais": "oui",
    "ouaip": "oui",
    "nan": "non",
    "du coup": "donc",
    "svp": "s'il vous plaît",
    "stp": "s'il te plaît",
}

REGIONAL_MAPPINGS = {
    "fr-FR": dict(_INFORMAL_SPEECH),
    "fr-CH": {
        **_INFORMAL_SPEECH,
        "natel": "téléphone portable",
        "bonne-main": "pourboire",
        "bonne main": "pourboire",
        "carnotzet": "cave à vin",
        "panosse": "serpillière",
        "cheni": "désordre",
        "foehn": "sèche-cheveux",
        "réclame": "publicité",
        "action": "promotion",
        "minérale": "eau minérale",
        "eau minérale": "eau minérale",
        "chocolat froid": "chocolat froid",
        "cornet de glace": "cornet de glace",
        "thé froid": "thé glacé",
        "ramequin": "tartelette au fromage",
    },
}

SLANG_TERMS = {}


# =============================================================================
# Domain Food & Drink Vocabulary
# =============================================================================

FOOD_TERMS = {
    # Entrées
    "entrée": "entrée",
    "hors d'oeuvre": "hors d'œuvre",
    "hors d'œuvre": "hors d'œuvre",
    "salade": "salade",
    "salade verte": "salade verte",
    "salade mixte": "salade mixte",
    "salade niçoise": "salade niçoise",
    "salade césar": "salade césar",
    "soupe": "soupe",
    "soupe à l'oignon": "soupe à l'oignon",
    "velouté": "velouté",
    "bisque": "bisque",
    "potage": "potage",
    "escargots": "escargots",
    "foie gras": "foie gras",
    "pâté": "pâté",
    "terrine": "terrine",
    "charcuterie": "charcuterie",
    # Plats principaux
    "boeuf": "bœuf",
    "bœuf": "bœuf",
    "boeuf bourguignon": "bœuf bourguignon",
    "bœuf bourguignon": "bœuf bourguignon",
    "pot au feu": "pot-au-feu",
    "pot-au-feu": "pot-au-feu",
    "coq au vin": "coq au vin",
    "cassoulet": "cassoulet",
    "choucroute": "choucroute",
    "ratatouille": "ratatouille",
    "bouillabaisse": "bouillabaisse",
    "confit de canard": "confit de canard",
    "magret de canard": "magret de canard",
    "côte de boeuf": "côte de bœuf",
    "côte de bœuf": "côte de bœuf",
    "entrecôte": "entrecôte",
    "steak": "steak",
    "steak frites": "steak frites",
    "steak tartare": "steak tartare",
    "blanquette de veau": "blanquette de veau",
    "escalope de veau": "escalope de veau",
    "gigot d'agneau": "gigot d'agneau",
    "croque-monsieur": "croque-monsieur",
    "croque monsieur": "croque-monsieur",
    "quiche": "quiche",
    "quiche lorraine": "quiche lorraine",
    "omelette": "omelette",
    "crêpe": "crêpe",
    "crêpes": "crêpes",
    "galette": "galette",
    "sandwich": "sandwich",
    "jambon-beurre": "jambon-beurre",
    "pizza": "pizza",
    "pâtes": "pâtes",
    # Volaille
    "poulet": "poulet",
    "poulet rôti": "poulet rôti",
    "canard": "canard",
    "dinde": "dinde",
    "pintade": "pintade",
    # Poissons et fruits de mer
    "poisson": "poisson",
    "saumon": "saumon",
    "truite": "truite",
    "sole": "sole",
    "loup": "loup de mer",
    "loup de mer": "loup de mer",
    "cabillaud": "cabillaud",
    "thon": "thon",
    "huîtres": "huîtres",
    "moules": "moules",
    "moules frites": "moules frites",
    "coquilles saint-jacques": "coquilles saint-jacques",
    "saint-jacques": "coquilles saint-jacques",
    "homard": "homard",
    "crevettes": "crevettes",
    "filets de perche": "filets de perche",
    # Accompagnements
    "légumes": "légumes",
    "pommes de terre": "pommes de terre",
    "purée": "purée",
    "frites": "frites",
    "gratin dauphinois": "gratin dauphinois",
    "haricots verts": "haricots verts",
    "riz": "riz",
    "rösti": "rösti",
    # Fromages
    "fromage": "fromage",
    "camembert": "camembert",
    "brie": "brie",
    "roquefort": "roquefort",
    "comté": "comté",
    "gruyère": "gruyère",
    "emmental": "emmental",
    "reblochon": "reblochon",
    "chèvre": "fromage de chèvre",
    "fromage de chèvre": "fromage de chèvre",
    "vacherin": "vacherin",
    # Desserts
    "dessert": "dessert",
    "tarte": "tarte",
    "tarte tatin": "tarte tatin",
    "tarte aux pommes": "tarte aux pommes",
    "tarte citron": "tarte au citron",
    "tarte au citron": "tarte au citron",
    "crème brûlée": "crème brûlée",
    "mousse au chocolat": "mousse au chocolat",
    "profiteroles": "profiteroles",
    "éclair": "éclair",
    "mille-feuille": "mille-feuille",
    "macaron": "macaron",
    "macarons": "macarons",
    "île flottante": "île flottante",
    "gâteau": "gâteau",
    "glace": "glace",
    "sorbet": "sorbet",
    "croissant": "croissant",
    "meringue double crème": "meringue à la double crème",
    "meringue à la double crème": "meringue à la double crème",
    # Boissons
    "vin": "vin",
    "vin rouge": "vin rouge",
    "vin blanc": "vin blanc",
    "vin rosé": "vin rosé",
    "champagne": "champagne",
    "bordeaux": "bordeaux",
    "bourgogne": "bourgogne",
    "beaujolais": "beaujolais",
    "chablis": "chablis",
    "bière": "bière",
    "pression": "bière pression",
    "bière pression": "bière pression",
    "demi de bière": "demi de bière",
    "cidre": "cidre",
    "eau": "eau",
    "eau plate": "eau plate",
    "eau gazeuse": "eau gazeuse",
    "carafe d'eau": "carafe d'eau",
    "perrier": "perrier",
    "jus": "jus",
    "jus d'orange": "jus d'orange",
    "jus de pomme": "jus de pomme",
    "café": "café",
    "expresso": "expresso",
    "café au lait": "café au lait",
    "café crème": "café crème",
    "cappuccino": "cappuccino",
    "thé": "thé",
    "tisane": "tisane",
    "chocolat chaud": "chocolat chaud",
    "limonade": "limonade",
    "coca": "coca-cola",
    "coca-cola": "coca-cola",
    # Spécialités suisses
    "fondue": "fondue",
    "fondue moitié-moitié": "fondue moitié-moitié",
    "raclette": "raclette",
    "croûte au fromage": "croûte au fromage",
    "malakoff": "malakoff",
    "papet vaudois": "papet vaudois",
    "saucisson vaudois": "saucisson vaudois",
    "longeole": "longeole",
    "rivella": "rivella",
    "vin chaud": "vin chaud",
}

FOOD_CATEGORY_KEYWORDS = [
    ("beverage", (
        "vin", "champagne", "bordeaux", "bourgogne", "beaujolais", "chablis",
        "bière", "cidre", " eau", "perrier", " jus ", "café", "expresso",
        "cappuccino", " thé ", "tisane", "chocolat chaud", "limonade", "coca",
        "rivella",
    )),
    ("dessert", (
        "tarte", "gâteau", "glace", "dessert", "crème brûlée", "mousse",
        "profiteroles", "éclair", "mille-feuille", "macaron", "île flottante",
        "sorbet", "meringue", "croissant", "crêpe",
    )),
    ("appetizer", (
        "salade", "soupe", "velouté", "bisque", "potage", "entrée", "escargots",
        "foie gras", "pâté", "terrine", "charcuterie", "hors d'œuvre",
    )),
    ("meat", (
        "bœuf", "veau", "agneau", "porc", "poulet", "canard", "dinde", "pintade",
        "entrecôte", "steak", "pot-au-feu", "coq au vin", "cassoulet",
        "saucisson", "longeole", "jambon",
    )),
    ("seafood", (
        "poisson", "saumon", "truite", " sole", "loup de mer", "cabillaud", "thon",
        "huîtres", "moules", "saint-jacques", "homard", "crevettes", "perche",
        "bouillabaisse",
    )),
    ("main_course", (
        "choucroute", "ratatouille", "croque-monsieur", "quiche", "omelette",
        "galette", "sandwich", "pizza", "pâtes", "fondue", "raclette", "croûte",
        "malakoff", "papet",
    )),
    ("side", (
        "légumes", "pommes de terre", "purée", "frites", "gratin", "haricots",
        "riz", "rösti",
    )),
]

FOOD_CATEGORY_OVERRIDES = {
    "steak frites": "meat",
    "moules frites": "seafood",
    "fromage de chèvre": "other",
}


# =============================================================================
# Common Restaurant Vocabulary
# =============================================================================

COMMON_WORDS = {
    "resto": "restaurant",
    "apéro": "apéritif",
    "p'tit déj": "petit-déjeuner",
    "petit déj": "petit-déjeuner",
    "petit déjeuner": "petit-déjeuner",
    "merci bien": "merci",
    "l'addition svp": "l'addition s'il vous plaît",
    "à emporter": "à emporter",
    "pour emporter": "à emporter",
    "sur place": "sur place",
}


# =============================================================================
# Phonetic Error Corrections (substring-level)
# =============================================================================

PHONETIC_REPLACEMENTS = {
    "crevète": "crevette",
    "omlet": "omelette",
    "bœf": "bœuf",
    "borgignon": "bourguignon",
    "casoulet": "cassoulet",
    "ratatouil": "ratatouille",
    "bouillabès": "bouillabaisse",
    "bouiyabès": "bouillabaisse",
    "konfi": "confit",
    "magré": "magret",
    "ekspresso": "expresso",
    "kapuchino": "cappuccino",
    "champaigne": "champagne",
    "bordeau": "bordeaux",
    "borgogne": "bourgogne",
    "bojolais": "beaujolais",
    "chabli": "chablis",
    "gruyèr": "gruyère",
    "rebloshon": "reblochon",
    "rokefor": "roquefort",
    "kamember": "camembert",
    "röchti": "rösti",
    "fondü": "fondue",
    "raklet": "raclette",
    "malakof": "malakoff",
    "rivèla": "rivella",
}


# =============================================================================
# Intent Taxonomy
# =============================================================================

INTENT_TRIGGERS = {
    "order": ("commander", [
        "commander", "je voudrais", "j'aimerais", "je prends", "nous prenons",
        "je vais prendre", "donnez-moi", "je veux",
    ]),
    "add": ("ajouter", ["aussi", "en plus", "également", "ajouter", "avec", "et", "plus"]),
    "remove": ("enlever", ["sans", "pas de", "enlever", "retirer", "ôter", "supprimer"]),
    "change": ("changer", ["changer", "remplacer", "plutôt", "à la place", "au lieu de"]),
    "pay": ("payer", ["payer", "l'addition", "la note", "combien", "le prix", "régler"]),
    "help": ("aide", [
        "aide", "qu'est-ce que", "conseil", "recommandation", "expliquer",
        "c'est quoi", "conseiller",
    ]),
    "repeat": ("répéter", ["répéter", "encore", "redire", "comment", "pardon", "excusez-moi"]),
    "cancel": ("annuler", [
        "annuler", "arrêter", "stop", "laissez tomber", "tant pis", "oublier",
    ]),
}

STRUCTURE_WORDS = [
    "le", "la", "les", "un", "une", "des", "du", "de", "au", "aux",
    "suis", "es", "est", "sommes", "êtes", "sont",
    "ai", "as", "a", "avons", "avez", "ont",
    "veux", "veut", "voulons", "voulez", "veulent", "voudrais", "voudrions",
]


# =============================================================================
# Numerals
# =============================================================================

NUMBER_UNITS = {
    "zéro": 0, "zero": 0, "deux": 2, "trois": 3, "quatre": 4, "cinq": 5,
    "six": 6, "sept": 7, "huit": 8, "neuf": 9, "dix": 10, "onze": 11,
    "douze": 12, "treize": 13, "quatorze": 14, "quinze": 15, "seize": 16,
    "vingt": 20, "trente": 30, "quarante": 40, "cinquante": 50,
    "soixante": 60, "septante": 70, "huitante": 80, "octante": 80,
    "nonante": 90,
    "quatre-vingt": 80, "quatre-vingts": 80,
    "quatre vingt": 80, "quatre vingts": 80,
}

NUMBER_MULTIPLIERS = {"cent": 100, "cents": 100, "mille": 1000}

# "un"/"une" are articles on their own but count as one in vingt-et-un
NUMBER_ARTICLES = {"un": True, "une": True}

ARTICLE_NOUNS = ["douzaine", "dizaine", "centaine", "million", "millions", "milliard"]

NUMBER_CONNECTORS = {"et": {"after": "tens", "before": ["un", "une", "onze"]}}

# soixante-dix, quatre-vingt-onze
COMPOUND_TEENS = True

NUMERAL_IDIOMS = ["mille-feuille", "mille feuille", "quatre-quarts", "quatre quarts", "mille mercis"]


# =============================================================================
# Entity Vocabularies
# =============================================================================

MODIFIERS = ["avec", "sans", "en plus", "à part", "supplémentaire", "extra", "double"]

SIZES = ["petit", "petite", "moyen", "moyenne", "grand", "grande", "géant", "géante"]

COOKING_METHODS = [
    "grillé", "grillée", "frit", "frite", "rôti", "rôtie", "poêlé", "poêlée",
    "gratiné", "gratinée", "braisé", "braisée", "vapeur", "flambé", "flambée",
    "saignant", "à point", "bien cuit", "bleu",
]


# =============================================================================
# Grammar Data
# =============================================================================

# Gendered nouns used to derive article and adjective agreement fixes
FEMININE_NOUNS = [
    "salade", "soupe", "bière", "pizza", "tarte", "glace", "omelette", "quiche",
    "crêpe", "galette", "entrée", "eau", "orange", "limonade", "tisane", "fondue",
    "raclette", "bouteille", "carafe", "tasse", "note", "addition", "carte",
    "viande", "sauce", "mousse", "purée", "choucroute", "ratatouille", "truite",
    "sole", "dinde", "pintade", "crème brûlée", "entrecôte", "portion", "frite",
]

MASCULINE_NOUNS = [
    "café", "vin", "thé", "dessert", "steak", "poulet", "poisson", "fromage",
    "croissant", "sandwich", "gâteau", "jus", "menu", "plat", "verre", "sorbet",
    "burger", "saumon", "canard", "cidre", "croque-monsieur", "expresso",
    "cappuccino", "chocolat chaud", "pain", "riz",
]

# Feminine plural nouns for plural adjective agreement
FEMININE_PLURAL_NOUNS = ["frites", "crevettes", "moules", "huîtres", "pâtes", "crêpes"]

# masculine adjective -> feminine form
ADJECTIVES = {
    "chaud": "chaude",
    "froid": "froide",
    "bon": "bonne",
    "frais": "fraîche",
    "gazeux": "gazeuse",
    "plat": "plate",
    "sucré": "sucrée",
    "salé": "salée",
    "épicé": "épicée",
    "grillé": "grillée",
    "gratiné": "gratinée",
    "vert": "verte",
    "blanc": "blanche",
    "mixte": "mixte",
}


# =============================================================================
# Proper Nouns (display forms)
# =============================================================================

PROPER_NOUNS = [
    "Bordeaux", "Bourgogne", "Champagne", "Beaujolais", "Sancerre", "Chablis",
    "Roquefort", "Camembert", "Brie", "Comté", "Reblochon", "Munster", "Gruyère",
    "Saint-Jacques", "Saint-Honoré", "Saint-Nectaire", "Pont-l'Évêque",
    "Paris-Brest", "Belle Hélène", "Perrier", "Rivella", "Coca-Cola",
    "Côtes du Rhône", "Paris", "Genève", "Lausanne", "Valais",
]
