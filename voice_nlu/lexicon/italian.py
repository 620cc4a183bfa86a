"""
Italian lexicon tables (it-IT, it-CH).

Numbers are written as single words in Italian ("ventitré", "centottanta",
"duemila"), so the numeral vocabulary is generated the same way as the
German one. "uno" is always the number one; "un" and "una" are articles.
"""

LANGUAGE = "it"
DEFAULT_VARIANT = "it-IT"

CONFIDENCE_LENGTH_DIVISOR = 15


# =============================================================================
# Normalization
# =============================================================================

ABBREVIATIONS = [
    (r"\s*&\s*", " e "),
    (r"(?<!\w)ecc\.", "eccetera"),
    (r"(?<!\w)etc\.", "eccetera"),
    (r"(?<!\w)sig\.ra(?!\w)", "signora"),
    (r"(?<!\w)sig\.(?=\s|$)", "signore"),
    (r"(\d+(?:[.,]\d+)?)\s*€", r"\1 euro"),
    (r"€", "euro"),
    (r"(?<!\w)eur(?!\w)", "euro"),
    (r"(?<!\w)chf(?!\w)", "franchi"),
    (r"(?<!\w)fr\.(?=\s|$)", "franchi"),
]


# =============================================================================
# Regional Dialect Mappings
# =============================================================================

_COLLOQUIAL_SPEECH = {
    # Northern
    "xe": "è",
    "ghe": "c'è",
    "no ghe": "non c'è",
    "gnente": "niente",
    "massa": "troppo",
    # Southern
    "nu poco": "un poco",
    "nu sacco": "molto",
    "accussì": "così",
    "assai": "molto",
    "mo' mo'": "subito",
    # Roman
    "annamo": "andiamo",
    "famo": "facciamo",
    "damo": "diamo",
    "stamo": "stiamo",
    "sò": "sono",
    "de": "di",
    "pe": "per",
    "co": "con",
    "mo": "adesso",
}

REGIONAL_MAPPINGS = {
    "it-IT": dict(_COLLOQUIAL_SPEECH),
    # Ticino
    "it-CH": {
        **_COLLOQUIAL_SPEECH,
        "natel": "cellulare",
        "azione": "offerta",
        "fondue": "fonduta",
        "schnitzel": "cotoletta viennese",
        "bratwurst": "salsiccia",
        "grotto": "osteria",
        "luganiga": "luganighetta",
    },
}

SLANG_TERMS = {}


# =============================================================================
# Domain Food & Drink Vocabulary
# =============================================================================

FOOD_TERMS = {
    # Primi piatti
    "pasta": "pasta",
    "spaghetti": "spaghetti",
    "spaghetti carbonara": "spaghetti alla carbonara",
    "spaghetti alla carbonara": "spaghetti alla carbonara",
    "spaghetti bolognese": "spaghetti alla bolognese",
    "spaghetti alla bolognese": "spaghetti alla bolognese",
    "penne": "penne",
    "penne arrabbiata": "penne all'arrabbiata",
    "penne all'arrabbiata": "penne all'arrabbiata",
    "fusilli": "fusilli",
    "rigatoni": "rigatoni",
    "farfalle": "farfalle",
    "linguine": "linguine",
    "fettuccine": "fettuccine",
    "tagliatelle": "tagliatelle",
    "lasagne": "lasagne",
    "ravioli": "ravioli",
    "tortellini": "tortellini",
    "gnocchi": "gnocchi",
    "agnolotti": "agnolotti",
    "risotto": "risotto",
    "risotto milanese": "risotto alla milanese",
    "risotto alla milanese": "risotto alla milanese",
    "risotto funghi": "risotto ai funghi",
    "risotto ai funghi": "risotto ai funghi",
    "risotto mare": "risotto ai frutti di mare",
    "risotto ai frutti di mare": "risotto ai frutti di mare",
    "minestrone": "minestrone",
    "polenta": "polenta",
    # Pizze
    "pizza": "pizza",
    "pizza margherita": "pizza margherita",
    "pizza marinara": "pizza marinara",
    "pizza quattro stagioni": "pizza quattro stagioni",
    "pizza quattro formaggi": "pizza ai quattro formaggi",
    "pizza ai quattro formaggi": "pizza ai quattro formaggi",
    "pizza diavola": "pizza diavola",
    "pizza capricciosa": "pizza capricciosa",
    "pizza napoletana": "pizza napoletana",
    "calzone": "calzone",
    "focaccia": "focaccia",
    # Carne
    "bistecca": "bistecca",
    "bistecca fiorentina": "bistecca alla fiorentina",
    "bistecca alla fiorentina": "bistecca alla fiorentina",
    "ossobuco": "ossobuco",
    "cotoletta": "cotoletta",
    "cotoletta milanese": "cotoletta alla milanese",
    "cotoletta alla milanese": "cotoletta alla milanese",
    "cotoletta viennese": "cotoletta viennese",
    "scaloppine": "scaloppine",
    "saltimbocca": "saltimbocca alla romana",
    "saltimbocca alla romana": "saltimbocca alla romana",
    "brasato": "brasato",
    "spezzatino": "spezzatino",
    "agnello": "agnello",
    "vitello": "vitello",
    "vitello tonnato": "vitello tonnato",
    "maiale": "maiale",
    "pollo": "pollo",
    "pollo parmigiana": "pollo alla parmigiana",
    "pollo alla parmigiana": "pollo alla parmigiana",
    "pollo cacciatore": "pollo alla cacciatora",
    "pollo alla cacciatora": "pollo alla cacciatora",
    "salsiccia": "salsiccia",
    "luganighetta": "luganighetta",
    # Pesce
    "pesce": "pesce",
    "branzino": "branzino",
    "orata": "orata",
    "salmone": "salmone",
    "tonno": "tonno",
    "baccalà": "baccalà",
    "frutti di mare": "frutti di mare",
    "vongole": "vongole",
    "cozze": "cozze",
    "gamberi": "gamberi",
    "calamari": "calamari",
    "polpo": "polpo",
    "aragosta": "aragosta",
    # Contorni
    "insalata": "insalata",
    "insalata mista": "insalata mista",
    "insalata verde": "insalata verde",
    "insalata caprese": "insalata caprese",
    "caprese": "insalata caprese",
    "verdure": "verdure",
    "verdure grigliate": "verdure grigliate",
    "patate": "patate",
    "patate al forno": "patate al forno",
    "patate fritte": "patate fritte",
    "patatine": "patatine fritte",
    "patatine fritte": "patatine fritte",
    "spinaci": "spinaci",
    "zucchine": "zucchine",
    "melanzane": "melanzane",
    "peperoni": "peperoni",
    # Antipasti e formaggi
    "antipasto": "antipasto",
    "antipasto misto": "antipasto misto",
    "antipasto italiano": "antipasto all'italiana",
    "antipasto all'italiana": "antipasto all'italiana",
    "bruschetta": "bruschetta",
    "prosciutto": "prosciutto",
    "prosciutto crudo": "prosciutto crudo",
    "prosciutto cotto": "prosciutto cotto",
    "salame": "salame",
    "mortadella": "mortadella",
    "bresaola": "bresaola",
    "mozzarella": "mozzarella",
    "mozzarella bufala": "mozzarella di bufala",
    "mozzarella di bufala": "mozzarella di bufala",
    "burrata": "burrata",
    "parmigiano": "parmigiano reggiano",
    "parmigiano reggiano": "parmigiano reggiano",
    "gorgonzola": "gorgonzola",
    "pecorino": "pecorino",
    "ricotta": "ricotta",
    "fonduta": "fonduta",
    # Dolci
    "tiramisù": "tiramisù",
    "panna cotta": "panna cotta",
    "gelato": "gelato",
    "sorbetto": "sorbetto",
    "cannoli": "cannoli",
    "cassata": "cassata",
    "sfogliatelle": "sfogliatelle",
    "babà": "babà",
    "pandoro": "pandoro",
    "panettone": "panettone",
    "crostata": "crostata",
    "millefoglie": "millefoglie",
    "torta": "torta",
    "affogato": "affogato al caffè",
    "affogato al caffè": "affogato al caffè",
    # Bevande
    "vino": "vino",
    "vino rosso": "vino rosso",
    "vino bianco": "vino bianco",
    "merlot": "merlot",
    "merlot del ticino": "merlot del ticino",
    "prosecco": "prosecco",
    "spumante": "spumante",
    "champagne": "champagne",
    "spritz": "spritz",
    "aperol spritz": "aperol spritz",
    "birra": "birra",
    "birra alla spina": "birra alla spina",
    "acqua": "acqua",
    "acqua naturale": "acqua naturale",
    "acqua frizzante": "acqua frizzante",
    "acqua gassata": "acqua frizzante",
    "spremuta": "spremuta",
    "succo": "succo di frutta",
    "succo di frutta": "succo di frutta",
    "aranciata": "aranciata",
    "limonata": "limonata",
    "caffè": "caffè",
    "espresso": "espresso",
    "cappuccino": "cappuccino",
    "caffè latte": "caffellatte",
    "caffellatte": "caffellatte",
    "latte macchiato": "latte macchiato",
    "macchiato": "caffè macchiato",
    "caffè macchiato": "caffè macchiato",
    "caffè corretto": "caffè corretto",
    "americano": "caffè americano",
    "caffè americano": "caffè americano",
    "tè": "tè",
    "tè freddo": "tè freddo",
    "camomilla": "camomilla",
    "tisana": "tisana",
    "grappa": "grappa",
    "limoncello": "limoncello",
    "gazzosa": "gazzosa",
}

FOOD_CATEGORY_KEYWORDS = [
    ("beverage", (
        "vino", "merlot", "prosecco", "spumante", "champagne", "spritz", "birra",
        "acqua", "spremuta", "succo", "aranciata", "limonata", "caffè", "caffellatte",
        "espresso", "cappuccino", "macchiato", " tè ", "camomilla", "tisana",
        "grappa", "limoncello", "gazzosa",
    )),
    ("dessert", (
        "tiramisù", "panna cotta", "gelato", "sorbetto", "cannoli", "cassata",
        "sfogliatelle", "babà", "pandoro", "panettone", "crostata", "millefoglie",
        "torta", "affogato",
    )),
    ("appetizer", (
        "antipast", "bruschetta", "caprese", "prosciutto", "salame", "mortadella",
        "bresaola", "mozzarella", "burrata", "minestrone",
    )),
    ("meat", (
        "bistecca", "ossobuco", "cotoletta", "scaloppine", "saltimbocca", "brasato",
        "spezzatino", "agnello", "vitello", "maiale", "pollo", "salsiccia",
        "luganighetta",
    )),
    ("seafood", (
        "pesce", "branzino", "orata", "salmone", "tonno", "baccalà", "frutti di mare",
        "vongole", "cozze", "gamberi", "calamari", "polpo", "aragosta",
    )),
    ("main_course", (
        "pizza", "pasta", "spaghetti", "penne", "fusilli", "rigatoni", "farfalle",
        "linguine", "fettuccine", "tagliatelle", "lasagne", "ravioli", "tortellini",
        "gnocchi", "agnolotti", "risotto", "calzone", "focaccia", "polenta", "fonduta",
    )),
    ("side", (
        "insalata", "verdure", "patate", "patatine", "spinaci", "zucchine",
        "melanzane", "peperoni",
    )),
]

FOOD_CATEGORY_OVERRIDES = {
    "risotto ai frutti di mare": "main_course",
    "vitello tonnato": "meat",
    "tè freddo": "beverage",
    "affogato al caffè": "dessert",
}


# =============================================================================
# Common Restaurant Vocabulary
# =============================================================================

COMMON_WORDS = {
    "menù": "menu",
    "menu": "menu",
    "carta dei vini": "carta dei vini",
    "conto": "conto",
    "tavolo": "tavolo",
    "cameriere": "cameriere",
    "coperto": "coperto",
    "per favore": "per favore",
    "per piacere": "per favore",
    "da asporto": "da asporto",
    "da portare via": "da asporto",
    "take away": "da asporto",
    "mangiare qui": "mangiare qui",
    "primo piatto": "primo piatto",
    "secondo piatto": "secondo piatto",
    "contorno": "contorno",
}


# =============================================================================
# Phonetic Error Corrections (substring-level)
# =============================================================================

PHONETIC_REPLACEMENTS = {
    "bruscheta": "bruschetta",
    "brusketta": "bruschetta",
    "spagheti": "spaghetti",
    "spageti": "spaghetti",
    "gnocci": "gnocchi",
    "niocchi": "gnocchi",
    "tiramisu": "tiramisù",
    "pana cota": "panna cotta",
    "panna cota": "panna cotta",
    "mozarela": "mozzarella",
    "mozzarela": "mozzarella",
    "parmiggiano": "parmigiano",
    "prosciuto": "prosciutto",
    "proshutto": "prosciutto",
    "capuccino": "cappuccino",
    "cappucino": "cappuccino",
    "machato": "macchiato",
    "makiato": "macchiato",
    "espreso": "espresso",
    "expresso": "espresso",
    "caprichosa": "capricciosa",
    "capriciosa": "capricciosa",
    "lazagne": "lasagne",
    "tagliatele": "tagliatelle",
    "fetuccine": "fettuccine",
    "panetone": "panettone",
    "ossobucco": "ossobuco",
    "gorgonsola": "gorgonzola",
    "bolonese": "bolognese",
    "carbonnara": "carbonara",
    "limonchello": "limoncello",
    "prosseco": "prosecco",
}


# =============================================================================
# Intent Taxonomy
# =============================================================================

INTENT_TRIGGERS = {
    "order": ("ordinare", [
        "ordinare", "vorrei", "prendo", "prendiamo", "desidero", "voglio",
        "mi porta", "mi porti", "ci porta",
    ]),
    "add": ("aggiungere", [
        "anche", "inoltre", "in più", "in piu", "aggiungere", "extra", "di più", "di piu",
    ]),
    "remove": ("togliere", ["senza", "non", "togliere", "levare", "eliminare"]),
    "change": ("cambiare", ["cambiare", "invece", "piuttosto", "al posto di", "sostituire"]),
    "pay": ("pagare", ["pagare", "il conto", "conto", "quanto costa", "prezzo", "quant'è"]),
    "help": ("aiuto", [
        "aiuto", "che cosa", "consiglio", "cos'è", "cosa è", "spiegare", "consigliare",
    ]),
    "repeat": ("ripetere", ["ripetere", "ancora", "di nuovo", "come ha detto", "scusi"]),
    "cancel": ("annullare", [
        "annullare", "basta", "cancellare", "lasciamo perdere", "lascia stare",
    ]),
}

STRUCTURE_WORDS = [
    "il", "lo", "la", "i", "gli", "le", "un", "uno", "una",
    "del", "dello", "della", "dei", "degli", "delle", "al", "allo", "alla", "ai",
    "sono", "è", "siamo", "ho", "ha", "abbiamo", "hanno",
    "voglio", "vuole", "vogliamo", "vorrei", "vorremmo", "posso", "può",
    "prendo", "prendiamo",
]


# =============================================================================
# Numerals
# =============================================================================

_BELOW_TWENTY = {
    0: "zero", 1: "uno", 2: "due", 3: "tre", 4: "quattro", 5: "cinque",
    6: "sei", 7: "sette", 8: "otto", 9: "nove", 10: "dieci", 11: "undici",
    12: "dodici", 13: "tredici", 14: "quattordici", 15: "quindici",
    16: "sedici", 17: "diciassette", 18: "diciotto", 19: "diciannove",
}

_TENS = {
    20: "venti", 30: "trenta", 40: "quaranta", 50: "cinquanta",
    60: "sessanta", 70: "settanta", 80: "ottanta", 90: "novanta",
}


def _join(prefix, rest):
    """Spellings of prefix + rest; the prefix vowel drops before uno/otto/ottanta."""
    forms = [prefix + rest]
    if rest[0] in "uo":
        forms.append(prefix[:-1] + rest)
    return forms


def _below_hundred(n):
    if n < 20:
        return [_BELOW_TWENTY[n]]
    tens, ones = divmod(n, 10)
    if ones == 0:
        return [_TENS[n]]
    words = _join(_TENS[tens * 10], _BELOW_TWENTY[ones])
    if ones == 3:
        words += [word[:-1] + "é" for word in words]
    return words


def _compound_numbers():
    """Written forms for 0-999 plus whole thousands up to 9000."""
    words = {}
    for n in range(100):
        for word in _below_hundred(n):
            words[word] = n
    for hundreds in range(1, 10):
        prefix = "cento" if hundreds == 1 else _BELOW_TWENTY[hundreds] + "cento"
        words[prefix] = hundreds * 100
        for rest in range(1, 100):
            for tail in _below_hundred(rest):
                for word in _join(prefix, tail):
                    words[word] = hundreds * 100 + rest
    for thousands in range(2, 10):
        words[_BELOW_TWENTY[thousands] + "mila"] = thousands * 1000
    # "cento" on its own is a multiplier
    del words["cento"]
    return words


NUMBER_UNITS = _compound_numbers()

NUMBER_MULTIPLIERS = {"cento": 100, "mille": 1000, "mila": 1000}

# article -> whether it can stand for "one" inside a compound
NUMBER_ARTICLES = {"un": False, "una": False}

ARTICLE_NOUNS = ["dozzina", "decina", "ventina", "centinaio", "milione", "milioni", "miliardo"]

# "mille e cinquecento", "duemila e cinquecento"
NUMBER_CONNECTORS = {"e": {}}

COMPOUND_TEENS = False

NUMERAL_IDIOMS = ["quattro stagioni", "quattro formaggi", "grazie mille", "mille grazie"]


# =============================================================================
# Entity Vocabularies
# =============================================================================

MODIFIERS = ["con", "senza", "extra", "in più", "a parte", "doppio", "doppia"]

SIZES = ["piccolo", "piccola", "medio", "media", "grande", "gigante", "maxi"]

COOKING_METHODS = [
    "alla griglia", "grigliato", "grigliata", "fritto", "fritta", "al forno",
    "arrosto", "al vapore", "bollito", "bollita", "impanato", "impanata",
    "affumicato", "al sangue", "media cottura", "ben cotto", "ben cotta", "al dente",
]


# =============================================================================
# Grammar Data
# =============================================================================

FEMININE_NOUNS = [
    "pizza", "pasta", "insalata", "acqua", "birra", "bistecca", "cotoletta",
    "bruschetta", "focaccia", "lasagna", "torta", "crostata", "cassata",
    "mozzarella", "burrata", "ricotta", "spremuta", "aranciata", "limonata",
    "bottiglia", "tazza", "caraffa", "carne", "porzione", "carta", "bevanda",
    "minestra", "zuppa", "polenta", "frittata", "orata", "aragosta", "tisana",
    "camomilla", "salsiccia", "grappa", "gazzosa", "margherita", "marinara",
]

MASCULINE_NOUNS = [
    "vino", "caffè", "tè", "gelato", "risotto", "dolce", "pollo", "pesce",
    "salmone", "tonno", "branzino", "panino", "tramezzino", "cappuccino",
    "espresso", "macchiato", "succo", "bicchiere", "piatto", "menu", "conto",
    "tiramisù", "sorbetto", "calzone", "prosciutto", "salame", "antipasto",
    "contorno", "formaggio", "brasato", "ossobuco", "polpo", "vitello", "agnello",
    "maiale", "aperitivo", "prosecco", "minestrone", "limoncello", "panettone",
    "spumante", "spritz", "spezzatino", "zabaione",
]

FEMININE_PLURAL_NOUNS = [
    "patate", "patatine", "verdure", "cozze", "vongole", "penne", "lasagne",
    "tagliatelle", "fettuccine", "linguine", "farfalle", "zucchine", "melanzane",
    "olive", "bevande", "birre",
]

MASCULINE_PLURAL_NOUNS = [
    "spaghetti", "gnocchi", "ravioli", "tortellini", "calamari", "gamberi",
    "funghi", "rigatoni", "fusilli", "cannoli", "pomodori", "peperoni", "spinaci",
    "agnolotti", "vini",
]

# masculine singular -> (feminine singular, masculine plural, feminine plural)
ADJECTIVES = {
    "freddo": ("fredda", "freddi", "fredde"),
    "caldo": ("calda", "caldi", "calde"),
    "buono": ("buona", "buoni", "buone"),
    "fresco": ("fresca", "freschi", "fresche"),
    "rosso": ("rossa", "rossi", "rosse"),
    "bianco": ("bianca", "bianchi", "bianche"),
    "misto": ("mista", "misti", "miste"),
    "grigliato": ("grigliata", "grigliati", "grigliate"),
    "fritto": ("fritta", "fritti", "fritte"),
    "cotto": ("cotta", "cotti", "cotte"),
    "crudo": ("cruda", "crudi", "crude"),
    "ghiacciato": ("ghiacciata", "ghiacciati", "ghiacciate"),
    "piccolo": ("piccola", "piccoli", "piccole"),
}


# =============================================================================
# Proper Nouns (display forms)
# =============================================================================

PROPER_NOUNS = [
    "Margherita", "Marinara", "Napoletana", "Capricciosa", "Diavola",
    "Quattro Stagioni", "Quattro Formaggi", "Gorgonzola", "Parmigiano Reggiano",
    "Chianti", "Barolo", "Valpolicella", "Lambrusco", "Merlot del Ticino",
    "Aperol", "Campari", "San Pellegrino", "Coca-Cola", "Roma", "Milano",
    "Napoli", "Firenze", "Lugano", "Bellinzona", "Locarno", "Ticino",
]
