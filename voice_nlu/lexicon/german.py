"""
German lexicon tables (de-DE, de-AT, de-BY, de-CH).

Umlauts and ß are kept as written; transcripts spelled with "ae"/"oe"/"ue"
are repaired by the grammar stage for the words listed there.
"""

LANGUAGE = "de"
DEFAULT_VARIANT = "de-DE"

CONFIDENCE_LENGTH_DIVISOR = 20


# =============================================================================
# Normalization
# =============================================================================

ABBREVIATIONS = [
    (r"\s*&\s*", " und "),
    (r"(?<!\w)z\.\s*b\.", "zum beispiel"),
    (r"(?<!\w)u\.\s*a\.", "unter anderem"),
    (r"(?<!\w)d\.\s*h\.", "das heißt"),
    (r"(?<!\w)usw\.", "und so weiter"),
    (r"(?<!\w)bzw\.", "beziehungsweise"),
    (r"(?<!\w)ca\.", "circa"),
    (r"(\d+(?:[.,]\d+)?)\s*€", r"\1 euro"),
    (r"€", "euro"),
    (r"(?<!\w)eur(?!\w)", "euro"),
    (r"(?<!\w)chf(?!\w)", "franken"),
]


# =============================================================================
# Regional Dialect Mappings
# =============================================================================

REGIONAL_MAPPINGS = {
    "de-DE": {
        "nee": "nein",
        "nö": "nein",
        "jo": "ja",
        "jup": "ja",
        "nich": "nicht",
        "wat": "was",
        "det": "das",
        "dit": "das",
        "jut": "gut",
        "ooch": "auch",
        "uff": "auf",
        "ma": "mal",
        "ne": "eine",
        "nen": "einen",
        "hab": "habe",
        "is": "ist",
        "sin": "sind",
        "ham": "haben",
        "solln": "sollen",
        "wolln": "wollen",
        "krieg": "kriege",
        "schrippe": "brötchen",
        "schrippen": "brötchen",
        "rundstück": "brötchen",
    },
    "de-AT": {
        "leiwand": "toll",
        "schauma": "schauen wir",
        "fesch": "hübsch",
        "servas": "hallo",
        "griaß": "grüß",
        "baba": "tschüss",
        "gscheit": "gescheit",
        "host": "hast",
        "hama": "haben wir",
        "sama": "sind wir",
        # Austrian food terminology
        "erdäpfel": "kartoffeln",
        "erdapfel": "kartoffel",
        "paradeiser": "tomaten",
        "marille": "aprikose",
        "marillen": "aprikosen",
        "palatschinken": "pfannkuchen",
        "topfen": "quark",
        "schlagobers": "schlagsahne",
        "obers": "sahne",
        "faschiertes": "hackfleisch",
        "semmel": "brötchen",
        "semmeln": "brötchen",
        "karfiol": "blumenkohl",
        "kren": "meerrettich",
        "fisolen": "grüne bohnen",
        "ribisel": "johannisbeeren",
        "kracherl": "limonade",
        "gspritzter": "weinschorle",
        "häferl": "tasse",
        "sackerl": "tüte",
    },
    "de-BY": {
        "mia": "wir",
        "des": "das",
        "wos": "was",
        "wia": "wie",
        "ois": "alles",
        "nix": "nichts",
        "ned": "nicht",
        "net": "nicht",
        "mog": "mag",
        "ko": "kann",
        "wui": "will",
        "soi": "soll",
        "muas": "muss",
        "hob": "habe",
        "is": "ist",
        "san": "sind",
        "ham": "haben",
        "a": "ein",
        "oa": "ein",
        "hoibe": "halbe",
        "mass": "maß",
        "semmel": "brötchen",
        "semmeln": "brötchen",
        "brezn": "brezel",
        "weißwurscht": "weißwurst",
        "leberkas": "leberkäse",
        "erdäpfel": "kartoffeln",
    },
    # Zürich-flavoured Swiss German; number words live in NUMBER_UNITS
    "de-CH": {
        "isch": "ist",
        "hät": "hat",
        "het": "hat",
        "git": "gibt",
        "chunt": "kommt",
        "chunnt": "kommt",
        "gaht": "geht",
        "goht": "geht",
        "chönd": "können",
        "chöi": "können",
        "chönt": "könnte",
        "chönnt": "könnte",
        "wänd": "wollen",
        "wött": "möchte",
        "wett": "möchte",
        "söttid": "sollten",
        "müesst": "müssen",
        "händ": "haben",
        "hätt": "hätte",
        "i": "ich",
        "i de": "in der",
        "nöd": "nicht",
        "nid": "nicht",
        "nüt": "nichts",
        "öppis": "etwas",
        "öpper": "jemand",
        "ohni": "ohne",
        "dezue": "dazu",
        "vo": "von",
        "uf": "auf",
        "au": "auch",
        "gärn": "gern",
        "gärne": "gerne",
        "luege": "schauen",
        "säge": "sagen",
        "gä": "geben",
        "nä": "nehmen",
        "hüt": "heute",
        "morn": "morgen",
        "spöter": "später",
        "grüezi": "guten tag",
        "grüessech": "guten tag",
        "hoi": "hallo",
        "sali": "hallo",
        "merci": "danke",
        "merci vilmal": "vielen dank",
        "excusé": "entschuldigung",
        "uf widerluege": "auf wiedersehen",
        "adieu": "auf wiedersehen",
        # Swiss restaurant vocabulary
        "kafi": "kaffee",
        "güggeli": "hähnchen",
        "wurscht": "wurst",
        "chäs": "käse",
        "röschti": "rösti",
        "spätzli": "spätzle",
        "wy": "wein",
        "gmües": "gemüse",
        "schoggi": "schokolade",
        "guetzli": "kekse",
        "chueche": "kuchen",
        "nachspys": "nachspeise",
        "nachspyse": "nachspeise",
        "vorspyse": "vorspeise",
        "zmorge": "frühstück",
        "zmittag": "mittagessen",
        "znacht": "abendessen",
        "rächnig": "rechnung",
        "bestellig": "bestellung",
        "reservierig": "reservierung",
        "trinkgäld": "trinkgeld",
        "franke": "franken",
        "stutz": "franken",
        "füfzgerli": "fünfzig rappen",
        "zwänzgerli": "zwanzig rappen",
        "zähnerli": "zehn rappen",
    },
}

SLANG_TERMS = {}


# =============================================================================
# Domain Food & Drink Vocabulary
# =============================================================================

FOOD_TERMS = {
    # Hauptgerichte
    "schnitzel": "schnitzel",
    "wiener schnitzel": "wiener schnitzel",
    "jägerschnitzel": "jägerschnitzel",
    "bratwurst": "bratwurst",
    "currywurst": "currywurst",
    "currywurst pommes": "currywurst mit pommes frites",
    "currywurst mit pommes frites": "currywurst mit pommes frites",
    "döner": "döner kebab",
    "döner kebab": "döner kebab",
    "sauerbraten": "sauerbraten",
    "schweinebraten": "schweinebraten",
    "gulasch": "gulasch",
    "kassler": "kassler",
    "weißwurst": "weißwurst",
    "bockwurst": "bockwurst",
    "leberkäse": "leberkäse",
    "fleischkäse": "leberkäse",
    "hendl": "hähnchen",
    "hähnchen": "hähnchen",
    "steak": "steak",
    "burger": "burger",
    "pizza": "pizza",
    "maultaschen": "maultaschen",
    "käsespätzle": "käsespätzle",
    "flammkuchen": "flammkuchen",
    "kartoffelpuffer": "kartoffelpuffer",
    "reibekuchen": "kartoffelpuffer",
    "fisch": "fisch",
    "lachs": "lachs",
    "forelle": "forelle",
    "fischbrötchen": "fischbrötchen",
    # Vorspeisen
    "suppe": "suppe",
    "gulaschsuppe": "gulaschsuppe",
    "salat": "salat",
    # Beilagen
    "sauerkraut": "sauerkraut",
    "rotkohl": "rotkohl",
    "blaukraut": "rotkohl",
    "kartoffelsalat": "kartoffelsalat",
    "kartoffeln": "kartoffeln",
    "pommes": "pommes frites",
    "pommes frites": "pommes frites",
    "bratkartoffeln": "bratkartoffeln",
    "kartoffelbrei": "kartoffelbrei",
    "spätzle": "spätzle",
    "knödel": "knödel",
    "semmelknödel": "semmelknödel",
    "nudeln": "nudeln",
    "brezel": "brezel",
    "brötchen": "brötchen",
    # Getränke
    "bier": "bier",
    "weißbier": "weißbier",
    "weizen": "weißbier",
    "pils": "pils",
    "kölsch": "kölsch",
    "altbier": "altbier",
    "radler": "radler",
    "alsterwasser": "radler",
    "schorle": "schorle",
    "apfelschorle": "apfelschorle",
    "sprudel": "mineralwasser",
    "selters": "mineralwasser",
    "mineralwasser": "mineralwasser",
    "wasser": "wasser",
    "limo": "limonade",
    "limonade": "limonade",
    "cola": "cola",
    "spezi": "spezi",
    "fanta": "fanta",
    "kaffee": "kaffee",
    "espresso": "espresso",
    "cappuccino": "cappuccino",
    "latte": "latte macchiato",
    "latte macchiato": "latte macchiato",
    "tee": "tee",
    "kakao": "kakao",
    "wein": "wein",
    "rotwein": "rotwein",
    "weißwein": "weißwein",
    "glühwein": "glühwein",
    "apfelsaft": "apfelsaft",
    "orangensaft": "orangensaft",
    # Süßes
    "kuchen": "kuchen",
    "torte": "torte",
    "schwarzwälder": "schwarzwälder kirschtorte",
    "schwarzwälder kirschtorte": "schwarzwälder kirschtorte",
    "apfelstrudel": "apfelstrudel",
    "kaiserschmarrn": "kaiserschmarrn",
    "pfannkuchen": "pfannkuchen",
    "eierkuchen": "pfannkuchen",
    "berliner": "berliner",
    "krapfen": "berliner",
    "lebkuchen": "lebkuchen",
    "eis": "eis",
    # Schweizer Spezialitäten
    "rösti": "rösti",
    "zürcher geschnetzeltes": "zürcher geschnetzeltes",
    "geschnetzeltes": "zürcher geschnetzeltes",
    "älplermagronen": "älplermagronen",
    "cervelat": "cervelat",
    "bündnerfleisch": "bündnerfleisch",
    "fondue": "fondue",
    "käsefondue": "fondue",
    "raclette": "raclette",
    "rivella": "rivella",
    "birchermüesli": "birchermüsli",
    "birchermüsli": "birchermüsli",
}

FOOD_CATEGORY_KEYWORDS = [
    ("beverage", (
        "bier", "pils", "kölsch", "radler", "schorle", "wasser", "limonade", "rivella",
        "cola", "spezi", "fanta", "kaffee", "espresso", "cappuccino", "macchiato",
        " tee ", "kakao", "wein", "saft",
    )),
    ("dessert", (
        "kuchen", "torte", "strudel", "schmarrn", "berliner", " eis ",
    )),
    ("appetizer", ("suppe", " salat ")),
    ("meat", (
        "schnitzel", "wurst", "döner", "braten", "gulasch", "kassler", "leberkäse",
        "hähnchen", "steak", "cervelat", "bündnerfleisch",
    )),
    ("seafood", ("fisch", "lachs", "forelle")),
    ("main_course", (
        "burger", "pizza", "maultaschen", "spätzle", "flammkuchen", "kartoffelpuffer",
        "geschnetzeltes", "älplermagronen", "fondue", "raclette",
    )),
    ("side", (
        "kartoffel", "pommes", "sauerkraut", "rotkohl", "knödel", "nudeln", "rösti",
    )),
]

FOOD_CATEGORY_OVERRIDES = {
    "pfannkuchen": "dessert",
    "lebkuchen": "dessert",
    "schweinebraten": "meat",
}


# =============================================================================
# Common Restaurant Vocabulary
# =============================================================================

COMMON_WORDS = {
    "karte": "speisekarte",
    "speisekarte": "speisekarte",
    "zum mitnehmen": "zum mitnehmen",
    "to go": "zum mitnehmen",
    "mitnehmen": "mitnehmen",
    "hier essen": "hier essen",
    "dankeschön": "danke schön",
    "bitteschön": "bitte schön",
    "mayo": "mayonnaise",
    "majo": "mayonnaise",
}


# =============================================================================
# Phonetic Error Corrections (substring-level)
# =============================================================================

PHONETIC_REPLACEMENTS = {
    "gewürtz": "gewürz",
    "ketchap": "ketchup",
    "ketschup": "ketchup",
    "majonnäse": "mayonnaise",
    "mayonäse": "mayonnaise",
    "tschili": "chili",
    "oreganno": "oregano",
    "papricka": "paprika",
    "tomahten": "tomaten",
    "zwibeln": "zwiebeln",
    "knopflauch": "knoblauch",
    "petersillie": "petersilie",
    "schnitzl": "schnitzel",
    "dönner": "döner",
    "kapputschino": "cappuccino",
    "expresso": "espresso",
}


# =============================================================================
# Intent Taxonomy
# =============================================================================

INTENT_TRIGGERS = {
    "order": ("bestellen", [
        "bestellen", "ordern", "nehmen", "nehme", "hätte gern", "hätte gerne",
        "hätt gern", "möchte", "ich will", "ich kriege", "ich bekomme",
    ]),
    "add": ("hinzufügen", ["dazu", "auch", "außerdem", "zusätzlich", "noch", "extra"]),
    "remove": ("entfernen", ["ohne", "weg", "nicht", "kein", "keine", "weglassen"]),
    "change": ("ändern", ["ändern", "anders", "stattdessen", "lieber", "tauschen"]),
    "pay": ("bezahlen", ["bezahlen", "zahlen", "rechnung", "kasse", "abrechnen"]),
    "help": ("hilfe", ["hilfe", "was gibt es", "empfehlung", "was ist", "erklären"]),
    "repeat": ("wiederholen", ["nochmal", "wiederholen", "noch einmal", "wie war das"]),
    "cancel": ("abbrechen", ["abbrechen", "stopp", "cancel", "vergiss es", "egal"]),
}

STRUCTURE_WORDS = [
    "der", "die", "das", "den", "dem", "des",
    "ein", "eine", "einen", "einem", "einer", "eines",
    "kann", "könnte", "will", "würde", "soll", "sollte", "muss", "müsste",
    "darf", "dürfte", "mag", "möchte", "möchten", "hätte",
    "bin", "ist", "sind", "habe", "hat", "haben",
]


# =============================================================================
# Numerals
# =============================================================================

_ONES = {
    1: "ein", 2: "zwei", 3: "drei", 4: "vier", 5: "fünf",
    6: "sechs", 7: "sieben", 8: "acht", 9: "neun",
}

_BELOW_TWENTY = {
    0: "null", 1: "eins", 2: "zwei", 3: "drei", 4: "vier", 5: "fünf",
    6: "sechs", 7: "sieben", 8: "acht", 9: "neun", 10: "zehn", 11: "elf",
    12: "zwölf", 13: "dreizehn", 14: "vierzehn", 15: "fünfzehn",
    16: "sechzehn", 17: "siebzehn", 18: "achtzehn", 19: "neunzehn",
}

_TENS = {
    20: "zwanzig", 30: "dreißig", 40: "vierzig", 50: "fünfzig",
    60: "sechzig", 70: "siebzig", 80: "achtzig", 90: "neunzig",
}


def _below_hundred(n):
    if n < 20:
        return _BELOW_TWENTY[n]
    tens, ones = divmod(n, 10)
    if ones == 0:
        return _TENS[n]
    return f"{_ONES[ones]}und{_TENS[tens * 10]}"


def _compound_numbers():
    """Written forms for 0-999 plus whole thousands up to 9000."""
    words = {}
    for n in range(100):
        words[_below_hundred(n)] = n
    for hundreds in range(1, 10):
        prefixes = [_ONES[hundreds] + "hundert"]
        if hundreds == 1:
            prefixes.append("hundert")
        for prefix in prefixes:
            for rest in range(100):
                word = prefix if rest == 0 else prefix + _below_hundred(rest)
                words[word] = hundreds * 100 + rest
    for thousands in range(2, 10):
        words[_ONES[thousands] + "tausend"] = thousands * 1000
    words["eintausend"] = 1000
    # "hundert" and "tausend" on their own are multipliers
    del words["hundert"]
    words["zwo"] = 2
    return words


# Swiss German number words, understood in every German variant the way
# septante is in every French one. "zäh" (tough) and "eis" (ice cream) are
# ordinary German words and stay out.
SWISS_NUMBER_WORDS = {
    "zwöi": 2, "zwee": 2, "drü": 3, "drüü": 3, "föif": 5, "füf": 5,
    "sächs": 6, "sibe": 7, "nüün": 9, "nün": 9, "drüzäh": 13, "vierzäh": 14,
    "füfzäh": 15, "sächzäh": 16, "sibzäh": 17, "achzäh": 18, "nüünzäh": 19,
    "zwänzg": 20, "drissg": 30, "drüssg": 30, "vierzg": 40, "füfzg": 50,
    "sächzg": 60, "sibzg": 70, "achzg": 80, "nüünzg": 90,
}

NUMBER_UNITS = {**_compound_numbers(), **SWISS_NUMBER_WORDS}

NUMBER_MULTIPLIERS = {"hundert": 100, "tausend": 1000, "tuusig": 1000}

NUMBER_ARTICLES = {"ein": False, "eine": False, "einen": False}

ARTICLE_NOUNS = ["dutzend", "million", "millionen", "milliarde"]

NUMBER_CONNECTORS = {}

COMPOUND_TEENS = False

NUMERAL_IDIOMS = ["vier jahreszeiten"]


# =============================================================================
# Entity Vocabularies
# =============================================================================

MODIFIERS = ["mit", "ohne", "extra", "zusätzlich", "dazu", "doppelt"]

SIZES = ["klein", "kleine", "kleinen", "mittel", "mittlere", "groß", "große", "großen"]

COOKING_METHODS = [
    "gegrillt", "gebraten", "frittiert", "gebacken", "gekocht", "gedünstet",
    "paniert", "geräuchert", "überbacken", "blutig", "medium", "durch",
]


# =============================================================================
# Grammar Data
# =============================================================================

FEMININE_NOUNS = [
    "cola", "pizza", "currywurst", "bratwurst", "weißwurst", "bockwurst",
    "brezel", "limonade", "schorle", "apfelschorle", "suppe", "gulaschsuppe",
    "torte", "portion", "flasche", "tasse", "rechnung", "speisekarte", "spezi",
    "fanta", "forelle", "maß", "halbe",
]

MASCULINE_NOUNS = [
    "kaffee", "kuchen", "döner kebab", "salat", "tee", "apfelstrudel",
    "kaiserschmarrn", "wein", "rotwein", "weißwein", "glühwein", "apfelsaft",
    "orangensaft", "espresso", "cappuccino", "burger", "leberkäse",
    "schweinebraten", "sauerbraten", "kakao", "berliner", "pfannkuchen",
    "latte macchiato", "flammkuchen", "lachs", "fisch", "knödel",
]

NEUTER_NOUNS = [
    "bier", "wasser", "mineralwasser", "schnitzel", "wiener schnitzel",
    "brötchen", "radler", "weißbier", "pils", "kölsch", "altbier", "eis",
    "steak", "hähnchen", "glas", "menü", "fischbrötchen",
]

# Restaurant nouns capitalized in canonical output besides the food lexicon
NOUNS = [
    "rechnung", "speisekarte", "tisch", "tag", "kellner", "kellnerin", "getränk",
    "getränke", "vorspeise", "hauptgang", "nachspeise", "portion", "flasche",
    "glas", "tasse", "euro", "franken", "ketchup", "mayonnaise", "senf",
    "zwiebeln", "knoblauch", "sahne", "quark", "tomaten", "aprikose",
    "hackfleisch", "käse", "tüte", "maß", "halbe", "dutzend", "beilage", "soße",
]


# =============================================================================
# Proper Nouns (display forms)
# =============================================================================

PROPER_NOUNS = [
    "Coca-Cola", "Fanta", "Sprite", "Spezi", "Berlin", "München", "Wien",
    "Hamburg", "Köln", "Bayern", "Schwarzwälder", "Rivella", "Zürich", "Bern",
    "Basel",
]
