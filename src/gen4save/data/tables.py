"""
Name → id lookup tables for the Gen 4 handheld games (Diamond, Pearl,
Platinum, HeartGold, SoulSilver).

Tables are keyed by the in-game English name exactly as the editor
accepts it. Each is wrapped in a read-only mapping so nothing at runtime
can drift from the cartridge data.

Move entries carry ``(move_id, base_pp)``.
"""

from types import MappingProxyType
from typing import Dict, Mapping, Tuple

# ── Species (National Dex 1-493) ──────────────────────────────────────────────

_SPECIES: Dict[str, int] = {
    "Bulbasaur": 1, "Ivysaur": 2, "Venusaur": 3, "Charmander": 4, "Charmeleon": 5,
    "Charizard": 6, "Squirtle": 7, "Wartortle": 8, "Blastoise": 9, "Caterpie": 10,
    "Metapod": 11, "Butterfree": 12, "Weedle": 13, "Kakuna": 14, "Beedrill": 15,
    "Pidgey": 16, "Pidgeotto": 17, "Pidgeot": 18, "Rattata": 19, "Raticate": 20,
    "Spearow": 21, "Fearow": 22, "Ekans": 23, "Arbok": 24, "Pikachu": 25,
    "Raichu": 26, "Sandshrew": 27, "Sandslash": 28, "NidoranF": 29, "Nidorina": 30,
    "Nidoqueen": 31, "NidoranM": 32, "Nidorino": 33, "Nidoking": 34, "Clefairy": 35,
    "Clefable": 36, "Vulpix": 37, "Ninetales": 38, "Jigglypuff": 39, "Wigglytuff": 40,
    "Zubat": 41, "Golbat": 42, "Oddish": 43, "Gloom": 44, "Vileplume": 45,
    "Paras": 46, "Parasect": 47, "Venonat": 48, "Venomoth": 49, "Diglett": 50,
    "Dugtrio": 51, "Meowth": 52, "Persian": 53, "Psyduck": 54, "Golduck": 55,
    "Mankey": 56, "Primeape": 57, "Growlithe": 58, "Arcanine": 59, "Poliwag": 60,
    "Poliwhirl": 61, "Poliwrath": 62, "Abra": 63, "Kadabra": 64, "Alakazam": 65,
    "Machop": 66, "Machoke": 67, "Machamp": 68, "Bellsprout": 69, "Weepinbell": 70,
    "Victreebel": 71, "Tentacool": 72, "Tentacruel": 73, "Geodude": 74, "Graveler": 75,
    "Golem": 76, "Ponyta": 77, "Rapidash": 78, "Slowpoke": 79, "Slowbro": 80,
    "Magnemite": 81, "Magneton": 82, "Farfetch'd": 83, "Doduo": 84, "Dodrio": 85,
    "Seel": 86, "Dewgong": 87, "Grimer": 88, "Muk": 89, "Shellder": 90,
    "Cloyster": 91, "Gastly": 92, "Haunter": 93, "Gengar": 94, "Onix": 95,
    "Drowzee": 96, "Hypno": 97, "Krabby": 98, "Kingler": 99, "Voltorb": 100,
    "Electrode": 101, "Exeggcute": 102, "Exeggutor": 103, "Cubone": 104, "Marowak": 105,
    "Hitmonlee": 106, "Hitmonchan": 107, "Lickitung": 108, "Koffing": 109, "Weezing": 110,
    "Rhyhorn": 111, "Rhydon": 112, "Chansey": 113, "Tangela": 114, "Kangaskhan": 115,
    "Horsea": 116, "Seadra": 117, "Goldeen": 118, "Seaking": 119, "Staryu": 120,
    "Starmie": 121, "Mr. Mime": 122, "Scyther": 123, "Jynx": 124, "Electabuzz": 125,
    "Magmar": 126, "Pinsir": 127, "Tauros": 128, "Magikarp": 129, "Gyarados": 130,
    "Lapras": 131, "Ditto": 132, "Eevee": 133, "Vaporeon": 134, "Jolteon": 135,
    "Flareon": 136, "Porygon": 137, "Omanyte": 138, "Omastar": 139, "Kabuto": 140,
    "Kabutops": 141, "Aerodactyl": 142, "Snorlax": 143, "Articuno": 144, "Zapdos": 145,
    "Moltres": 146, "Dratini": 147, "Dragonair": 148, "Dragonite": 149, "Mewtwo": 150,
    "Mew": 151, "Chikorita": 152, "Bayleef": 153, "Meganium": 154, "Cyndaquil": 155,
    "Quilava": 156, "Typhlosion": 157, "Totodile": 158, "Croconaw": 159, "Feraligatr": 160,
    "Sentret": 161, "Furret": 162, "Hoothoot": 163, "Noctowl": 164, "Ledyba": 165,
    "Ledian": 166, "Spinarak": 167, "Ariados": 168, "Crobat": 169, "Chinchou": 170,
    "Lanturn": 171, "Pichu": 172, "Cleffa": 173, "Igglybuff": 174, "Togepi": 175,
    "Togetic": 176, "Natu": 177, "Xatu": 178, "Mareep": 179, "Flaaffy": 180,
    "Ampharos": 181, "Bellossom": 182, "Marill": 183, "Azumarill": 184, "Sudowoodo": 185,
    "Politoed": 186, "Hoppip": 187, "Skiploom": 188, "Jumpluff": 189, "Aipom": 190,
    "Sunkern": 191, "Sunflora": 192, "Yanma": 193, "Wooper": 194, "Quagsire": 195,
    "Espeon": 196, "Umbreon": 197, "Murkrow": 198, "Slowking": 199, "Misdreavus": 200,
    "Unown": 201, "Wobbuffet": 202, "Girafarig": 203, "Pineco": 204, "Forretress": 205,
    "Dunsparce": 206, "Gligar": 207, "Steelix": 208, "Snubbull": 209, "Granbull": 210,
    "Qwilfish": 211, "Scizor": 212, "Shuckle": 213, "Heracross": 214, "Sneasel": 215,
    "Teddiursa": 216, "Ursaring": 217, "Slugma": 218, "Magcargo": 219, "Swinub": 220,
    "Piloswine": 221, "Corsola": 222, "Remoraid": 223, "Octillery": 224, "Delibird": 225,
    "Mantine": 226, "Skarmory": 227, "Houndour": 228, "Houndoom": 229, "Kingdra": 230,
    "Phanpy": 231, "Donphan": 232, "Porygon2": 233, "Stantler": 234, "Smeargle": 235,
    "Tyrogue": 236, "Hitmontop": 237, "Smoochum": 238, "Elekid": 239, "Magby": 240,
    "Miltank": 241, "Blissey": 242, "Raikou": 243, "Entei": 244, "Suicune": 245,
    "Larvitar": 246, "Pupitar": 247, "Tyranitar": 248, "Lugia": 249, "Ho-Oh": 250,
    "Celebi": 251, "Treecko": 252, "Grovyle": 253, "Sceptile": 254, "Torchic": 255,
    "Combusken": 256, "Blaziken": 257, "Mudkip": 258, "Marshtomp": 259, "Swampert": 260,
    "Poochyena": 261, "Mightyena": 262, "Zigzagoon": 263, "Linoone": 264, "Wurmple": 265,
    "Silcoon": 266, "Beautifly": 267, "Cascoon": 268, "Dustox": 269, "Lotad": 270,
    "Lombre": 271, "Ludicolo": 272, "Seedot": 273, "Nuzleaf": 274, "Shiftry": 275,
    "Taillow": 276, "Swellow": 277, "Wingull": 278, "Pelipper": 279, "Ralts": 280,
    "Kirlia": 281, "Gardevoir": 282, "Surskit": 283, "Masquerain": 284, "Shroomish": 285,
    "Breloom": 286, "Slakoth": 287, "Vigoroth": 288, "Slaking": 289, "Nincada": 290,
    "Ninjask": 291, "Shedinja": 292, "Whismur": 293, "Loudred": 294, "Exploud": 295,
    "Makuhita": 296, "Hariyama": 297, "Azurill": 298, "Nosepass": 299, "Skitty": 300,
    "Delcatty": 301, "Sableye": 302, "Mawile": 303, "Aron": 304, "Lairon": 305,
    "Aggron": 306, "Meditite": 307, "Medicham": 308, "Electrike": 309, "Manectric": 310,
    "Plusle": 311, "Minun": 312, "Volbeat": 313, "Illumise": 314, "Roselia": 315,
    "Gulpin": 316, "Swalot": 317, "Carvanha": 318, "Sharpedo": 319, "Wailmer": 320,
    "Wailord": 321, "Numel": 322, "Camerupt": 323, "Torkoal": 324, "Spoink": 325,
    "Grumpig": 326, "Spinda": 327, "Trapinch": 328, "Vibrava": 329, "Flygon": 330,
    "Cacnea": 331, "Cacturne": 332, "Swablu": 333, "Altaria": 334, "Zangoose": 335,
    "Seviper": 336, "Lunatone": 337, "Solrock": 338, "Barboach": 339, "Whiscash": 340,
    "Corphish": 341, "Crawdaunt": 342, "Baltoy": 343, "Claydol": 344, "Lileep": 345,
    "Cradily": 346, "Anorith": 347, "Armaldo": 348, "Feebas": 349, "Milotic": 350,
    "Castform": 351, "Kecleon": 352, "Shuppet": 353, "Banette": 354, "Duskull": 355,
    "Dusclops": 356, "Tropius": 357, "Chimecho": 358, "Absol": 359, "Wynaut": 360,
    "Snorunt": 361, "Glalie": 362, "Spheal": 363, "Sealeo": 364, "Walrein": 365,
    "Clamperl": 366, "Huntail": 367, "Gorebyss": 368, "Relicanth": 369, "Luvdisc": 370,
    "Bagon": 371, "Shelgon": 372, "Salamence": 373, "Beldum": 374, "Metang": 375,
    "Metagross": 376, "Regirock": 377, "Regice": 378, "Registeel": 379, "Latias": 380,
    "Latios": 381, "Kyogre": 382, "Groudon": 383, "Rayquaza": 384, "Jirachi": 385,
    "Deoxys": 386, "Turtwig": 387, "Grotle": 388, "Torterra": 389, "Chimchar": 390,
    "Monferno": 391, "Infernape": 392, "Piplup": 393, "Prinplup": 394, "Empoleon": 395,
    "Starly": 396, "Staravia": 397, "Staraptor": 398, "Bidoof": 399, "Bibarel": 400,
    "Kricketot": 401, "Kricketune": 402, "Shinx": 403, "Luxio": 404, "Luxray": 405,
    "Budew": 406, "Roserade": 407, "Cranidos": 408, "Rampardos": 409, "Shieldon": 410,
    "Bastiodon": 411, "Burmy": 412, "Wormadam": 413, "Mothim": 414, "Combee": 415,
    "Vespiquen": 416, "Pachirisu": 417, "Buizel": 418, "Floatzel": 419, "Cherubi": 420,
    "Cherrim": 421, "Shellos": 422, "Gastrodon": 423, "Ambipom": 424, "Drifloon": 425,
    "Drifblim": 426, "Buneary": 427, "Lopunny": 428, "Mismagius": 429, "Honchkrow": 430,
    "Glameow": 431, "Purugly": 432, "Chingling": 433, "Stunky": 434, "Skuntank": 435,
    "Bronzor": 436, "Bronzong": 437, "Bonsly": 438, "Mime Jr.": 439, "Happiny": 440,
    "Chatot": 441, "Spiritomb": 442, "Gible": 443, "Gabite": 444, "Garchomp": 445,
    "Munchlax": 446, "Riolu": 447, "Lucario": 448, "Hippopotas": 449, "Hippowdon": 450,
    "Skorupi": 451, "Drapion": 452, "Croagunk": 453, "Toxicroak": 454, "Carnivine": 455,
    "Finneon": 456, "Lumineon": 457, "Mantyke": 458, "Snover": 459, "Abomasnow": 460,
    "Weavile": 461, "Magnezone": 462, "Lickilicky": 463, "Rhyperior": 464, "Tangrowth": 465,
    "Electivire": 466, "Magmortar": 467, "Togekiss": 468, "Yanmega": 469, "Leafeon": 470,
    "Glaceon": 471, "Gliscor": 472, "Mamoswine": 473, "Porygon-Z": 474, "Gallade": 475,
    "Probopass": 476, "Dusknoir": 477, "Froslass": 478, "Rotom": 479, "Uxie": 480,
    "Mesprit": 481, "Azelf": 482, "Dialga": 483, "Palkia": 484, "Heatran": 485,
    "Regigigas": 486, "Giratina": 487, "Cresselia": 488, "Phione": 489, "Manaphy": 490,
    "Darkrai": 491, "Shaymin": 492, "Arceus": 493,
}

# ── Abilities ─────────────────────────────────────────────────────────────────

_ABILITIES: Dict[str, int] = {
    "Stench": 1, "Drizzle": 2, "Speed Boost": 3, "Battle Armor": 4,
    "Sturdy": 5, "Damp": 6, "Limber": 7, "Sand Veil": 8,
    "Static": 9, "Volt Absorb": 10, "Water Absorb": 11, "Oblivious": 12,
    "Cloud Nine": 13, "Compound Eyes": 14, "Insomnia": 15, "Color Change": 16,
    "Immunity": 17, "Flash Fire": 18, "Shield Dust": 19, "Own Tempo": 20,
    "Suction Cups": 21, "Intimidate": 22, "Shadow Tag": 23, "Rough Skin": 24,
    "Wonder Guard": 25, "Levitate": 26, "Effect Spore": 27, "Synchronize": 28,
    "Clear Body": 29, "Natural Cure": 30, "Lightning Rod": 31, "Serene Grace": 32,
    "Swift Swim": 33, "Chlorophyll": 34, "Illuminate": 35, "Trace": 36,
    "Huge Power": 37, "Poison Point": 38, "Inner Focus": 39, "Magma Armor": 40,
    "Water Veil": 41, "Magnet Pull": 42, "Soundproof": 43, "Rain Dish": 44,
    "Sand Stream": 45, "Pressure": 46, "Thick Fat": 47, "Early Bird": 48,
    "Flame Body": 49, "Run Away": 50, "Keen Eye": 51, "Hyper Cutter": 52,
    "Pickup": 53, "Truant": 54, "Hustle": 55, "Cute Charm": 56,
    "Plus": 57, "Minus": 58, "Forecast": 59, "Sticky Hold": 60,
    "Shed Skin": 61, "Guts": 62, "Marvel Scale": 63, "Liquid Ooze": 64,
    "Overgrow": 65, "Blaze": 66, "Torrent": 67, "Swarm": 68,
    "Rock Head": 69, "Drought": 70, "Arena Trap": 71, "Vital Spirit": 72,
    "White Smoke": 73, "Pure Power": 74, "Shell Armor": 75, "Air Lock": 76,
    "Tangled Feet": 77, "Motor Drive": 78, "Rivalry": 79, "Steadfast": 80,
    "Snow Cloak": 81, "Gluttony": 82, "Anger Point": 83, "Unburden": 84,
    "Heatproof": 85, "Simple": 86, "Dry Skin": 87, "Download": 88,
    "Iron Fist": 89, "Poison Heal": 90, "Adaptability": 91, "Skill Link": 92,
    "Hydration": 93, "Solar Power": 94, "Quick Feet": 95, "Normalize": 96,
    "Sniper": 97, "Magic Guard": 98, "No Guard": 99, "Stall": 100,
    "Technician": 101, "Leaf Guard": 102, "Klutz": 103, "Mold Breaker": 104,
    "Super Luck": 105, "Aftermath": 106, "Anticipation": 107, "Forewarn": 108,
    "Unaware": 109, "Tinted Lens": 110, "Filter": 111, "Slow Start": 112,
    "Scrappy": 113, "Storm Drain": 114, "Ice Body": 115, "Solid Rock": 116,
    "Snow Warning": 117, "Honey Gather": 118, "Frisk": 119, "Reckless": 120,
    "Multitype": 121, "Flower Gift": 122, "Bad Dreams": 123,
}

# ── Moves: name → (id, base PP) ───────────────────────────────────────────────

_MOVES: Dict[str, Tuple[int, int]] = {
    "Pound": (1, 35), "Karate Chop": (2, 25), "Double Slap": (3, 10),
    "Comet Punch": (4, 15), "Mega Punch": (5, 20), "Pay Day": (6, 20),
    "Fire Punch": (7, 15), "Ice Punch": (8, 15), "Thunder Punch": (9, 15),
    "Scratch": (10, 35), "Vise Grip": (11, 30), "Guillotine": (12, 5),
    "Razor Wind": (13, 10), "Swords Dance": (14, 20), "Cut": (15, 30),
    "Gust": (16, 35), "Wing Attack": (17, 35), "Whirlwind": (18, 20),
    "Fly": (19, 15), "Bind": (20, 20), "Slam": (21, 20),
    "Vine": (22, 25), "Stomp": (23, 20), "Double Kick": (24, 30),
    "Mega Kick": (25, 5), "Jump Kick": (26, 10), "Rolling Kick": (27, 15),
    "Sand Attack": (28, 15), "Headbutt": (29, 15), "Horn Attack": (30, 25),
    "Fury Attack": (31, 20), "Horn Drill": (32, 5), "Tackle": (33, 35),
    "Body Slam": (34, 15), "Wrap": (35, 20), "Take Down": (36, 20),
    "Thrash": (37, 10), "Double-Edge": (38, 15), "Tail Whip": (39, 30),
    "Poison Sting": (40, 35), "Twineedle": (41, 20), "Pin Missile": (42, 20),
    "Leer": (43, 30), "Bite": (44, 25), "Growl": (45, 40),
    "Roar": (46, 20), "Sing": (47, 15), "Supersonic": (48, 20),
    "Sonic Boom": (49, 20), "Disable": (50, 20), "Acid": (51, 30),
    "Ember": (52, 25), "Flamethrower": (53, 15), "Mist": (54, 30),
    "Water Gun": (55, 25), "Hydro Pump": (56, 5), "Surf": (57, 15),
    "Ice Beam": (58, 10), "Blizzard": (59, 5), "Psybeam": (60, 20),
    "Bubble Beam": (61, 20), "Aurora Beam": (62, 20), "Hyper Beam": (63, 5),
    "Peck": (64, 35), "Drill Peck": (65, 20), "Submission": (66, 20),
    "Low Kick": (67, 20), "Counter": (68, 20), "Seismic Toss": (69, 20),
    "Strength": (70, 15), "Absorb": (71, 5), "Mega Drain": (72, 15),
    "Leech Seed": (73, 10), "Growth": (74, 20), "Razor Leaf": (75, 25),
    "Solar Beam": (76, 10), "Poison Powder": (77, 35), "Stun Spore": (78, 30),
    "Sleep Powder": (79, 15), "Petal Dance": (80, 10), "String Shot": (81, 40),
    "Dragon Rage": (82, 10), "Fire Spin": (83, 15), "Thunder Shock": (84, 30),
    "Thunderbolt": (85, 15), "Thunder Wave": (86, 20), "Thunder": (87, 10),
    "Rock Throw": (88, 15), "Earthquake": (89, 10), "Fissure": (90, 5),
    "Dig": (91, 10), "Toxic": (92, 10), "Confusion": (93, 25),
    "Psychic": (94, 10), "Hypnosis": (95, 20), "Meditate": (96, 40),
    "Agility": (97, 30), "Quick Attack": (98, 30), "Rage": (99, 20),
    "Teleport": (100, 20), "Night Shade": (101, 15), "Mimic": (102, 10),
    "Screech": (103, 40), "Double Team": (104, 15), "Recover": (105, 10),
    "Harden": (106, 30), "Minimize": (107, 10), "Smokescreen": (108, 20),
    "Confuse Ray": (109, 10), "Withdraw": (110, 40), "Defense Curl": (111, 40),
    "Barrier": (112, 20), "Light Screen": (113, 30), "Haze": (114, 30),
    "Reflect": (115, 20), "Focus Energy": (116, 30), "Bide": (117, 10),
    "Metronome": (118, 10), "Mirror Move": (119, 20), "Self-Destruct": (120, 5),
    "Egg Bomb": (121, 10), "Lick": (122, 30), "Smog": (123, 20),
    "Sludge": (124, 20), "Bone Club": (125, 20), "Fire Blast": (126, 5),
    "Waterfall": (127, 15), "Clamp": (128, 15), "Swift": (129, 20),
    "Skull Bash": (130, 10), "Spike Cannon": (131, 15), "Constrict": (132, 35),
    "Amnesia": (133, 20), "Kinesis": (134, 15), "Soft-Boiled": (135, 10),
    "High Jump Kick": (136, 10), "Glare": (137, 30), "Dream Eater": (138, 15),
    "Poison Gas": (139, 40), "Barrage": (140, 20), "Leech Life": (141, 10),
    "Lovely Kiss": (142, 10), "Sky Attack": (143, 5), "Transform": (144, 10),
    "Bubble": (145, 30), "Dizzy Punch": (146, 10), "Spore": (147, 15),
    "Flash": (148, 20), "Psywave": (149, 15), "Splash": (150, 40),
    "Acid Armor": (151, 20), "Crabhammer": (152, 10), "Explosion": (153, 5),
    "Fury Swipes": (154, 15), "Bonemerang": (155, 10), "Rest": (156, 10),
    "Rock Slide": (157, 10), "Hyper Fang": (158, 15), "Sharpen": (159, 30),
    "Conversion": (160, 30), "Tri Attack": (161, 10), "Super Fang": (162, 10),
    "Slash": (163, 20), "Substitute": (164, 10), "Struggle": (165, 1),
    "Sketch": (166, 1), "Triple Kick": (167, 10), "Thief": (168, 25),
    "Spider Web": (169, 10), "Mind Reader": (170, 5), "Nightmare": (171, 15),
    "Flame Wheel": (172, 25), "Snore": (173, 15), "Curse": (174, 10),
    "Flail": (175, 15), "Conversion 2": (176, 30), "Aeroblast": (177, 5),
    "Cotton Spore": (178, 40), "Reversal": (179, 15), "Spite": (180, 10),
    "Powder Snow": (181, 25), "Protect": (182, 10), "Mach Punch": (183, 30),
    "Scary Face": (184, 10), "Feint Attack": (185, 20), "Sweet Kiss": (186, 10),
    "Belly Drum": (187, 10), "Sludge Bomb": (188, 10), "Mud-Slap": (189, 10),
    "Octazooka": (190, 10), "Spikes": (191, 20), "Zap Cannon": (192, 5),
    "Foresight": (193, 40), "Destiny Bond": (194, 5), "Perish Song": (195, 5),
    "Icy Wind": (196, 15), "Detect": (197, 5), "Bone Rush": (198, 10),
    "Lock-On": (199, 5), "Outrage": (200, 10), "Sandstorm": (201, 10),
    "Giga Drain": (202, 10), "Endure": (203, 10), "Charm": (204, 20),
    "Rollout": (205, 20), "False Swipe": (206, 40), "Swagger": (207, 15),
    "Milk Drink": (208, 10), "Spark": (209, 20), "Fury Cutter": (210, 20),
    "Steel Wing": (211, 25), "Mean Look": (212, 5), "Attract": (213, 15),
    "Sleep Talk": (214, 10), "Heal Bell": (215, 5), "Return": (216, 20),
    "Present": (217, 15), "Frustration": (218, 20), "Safeguard": (219, 25),
    "Pain Split": (220, 20), "Sacred Fire": (221, 5), "Magnitude": (222, 30),
    "Dynamic Punch": (223, 5), "Megahorn": (224, 10), "Dragon Breath": (225, 20),
    "Baton Pass": (226, 40), "Encore": (227, 5), "Pursuit": (228, 20),
    "Rapid Spin": (229, 40), "Sweet Scent": (230, 20), "Iron Tail": (231, 15),
    "Metal Claw": (232, 35), "Vital Throw": (233, 10), "Morning Sun": (234, 5),
    "Synthesis": (235, 5), "Moonlight": (236, 5), "Hidden Power": (237, 15),
    "Cross Chop": (238, 5), "Twister": (239, 20), "Rain Dance": (240, 5),
    "Sunny Day": (241, 5), "Crunch": (242, 15), "Mirror Coat": (243, 20),
    "Psych Up": (244, 10), "Extreme Speed": (245, 5), "Ancient Power": (246, 5),
    "Shadow Ball": (247, 15), "Future Sight": (248, 10), "Rock Smash": (249, 15),
    "Whirlpool": (250, 15), "Beat Up": (251, 10), "Fake Out": (252, 10),
    "Uproar": (253, 10), "Stockpile": (254, 20), "Spit Up": (255, 10),
    "Swallow": (256, 10), "Heat Wave": (257, 10), "Hail": (258, 10),
    "Torment": (259, 15), "Flatter": (260, 15), "Will-O-Wisp": (261, 15),
    "Memento": (262, 10), "Facade": (263, 20), "Focus Punch": (264, 20),
    "Smelling Salts": (265, 10), "Follow Me": (266, 20), "Nature Power": (267, 20),
    "Charge": (268, 20), "Taunt": (269, 20), "Helping Hand": (270, 20),
    "Trick": (271, 10), "Role Play": (272, 10), "Wish": (273, 10),
    "Assist": (274, 20), "Ingrain": (275, 20), "Superpower": (276, 5),
    "Magic Coat": (277, 15), "Recycle": (278, 10), "Revenge": (279, 10),
    "Brick Break": (280, 15), "Yawn": (281, 10), "Knock Off": (282, 20),
    "Endeavor": (283, 5), "Eruption": (284, 5), "Skill Swap": (285, 10),
    "Imprison": (286, 10), "Refresh": (287, 20), "Grudge": (288, 5),
    "Snatch": (289, 10), "Secret Power": (290, 20), "Dive": (291, 10),
    "Arm Thrust": (292, 20), "Camouflage": (293, 20), "Tail Glow": (294, 20),
    "Luster Purge": (295, 5), "Mist Ball": (296, 5), "Feather Dance": (297, 15),
    "Teeter Dance": (298, 20), "Blaze Kick": (299, 10), "Mud Sport": (300, 15),
    "Ice Ball": (301, 20), "Needle Arm": (302, 15), "Slack Off": (303, 10),
    "Hyper Voice": (304, 10), "Poison Fang": (305, 15), "Crush Claw": (306, 10),
    "Blast Burn": (307, 5), "Hydro Cannon": (308, 5), "Meteor Mash": (309, 10),
    "Astonish": (310, 15), "Weather Ball": (311, 10), "Aromatherapy": (312, 5),
    "Fake Tears": (313, 20), "Air Cutter": (314, 25), "Overheat": (315, 5),
    "Odor Sleuth": (316, 40), "Rock Tomb": (317, 15), "Silver Wind": (318, 5),
    "Metal Sound": (319, 40), "Grass Whistle": (320, 15), "Tickle": (321, 20),
    "Cosmic Power": (322, 20), "Water Spout": (323, 5), "Signal Beam": (324, 15),
    "Shadow Punch": (325, 20), "Extrasensory": (326, 20), "Sky Uppercut": (327, 15),
    "Sand Tomb": (328, 15), "Sheer Cold": (329, 5), "Muddy Water": (330, 10),
    "Bullet Seed": (331, 30), "Aerial Ace": (332, 20), "Icicle Spear": (333, 30),
    "Iron Defense": (334, 15), "Block": (335, 5), "Howl": (336, 40),
    "Dragon Claw": (337, 15), "Frenzy Plant": (338, 5), "Bulk Up": (339, 20),
    "Bounce": (340, 5), "Mud Shot": (341, 15), "Poison Tail": (342, 25),
    "Covet": (343, 25), "Volt Tackle": (344, 15), "Magical Leaf": (345, 20),
    "Water Sport": (346, 15), "Calm Mind": (347, 20), "Leaf Blade": (348, 15),
    "Dragon Dance": (349, 20), "Rock Blast": (350, 10), "Shock Wave": (351, 20),
    "Water Pulse": (352, 20), "Doom Desire": (353, 5), "Psycho Boost": (354, 5),
    "Roost": (355, 10), "Gravity": (356, 5), "Miracle Eye": (357, 40),
    "Wake-Up Slap": (358, 10), "Hammer Arm": (359, 10), "Gyro Ball": (360, 5),
    "Healing Wish": (361, 10), "Brine": (362, 10), "Natural Gift": (363, 15),
    "Feint": (364, 10), "Pluck": (365, 20), "Tailwind": (366, 15),
    "Acupressure": (367, 30), "Metal Burst": (368, 10), "U-turn": (369, 20),
    "Close Combat": (370, 5), "Payback": (371, 10), "Assurance": (372, 10),
    "Embargo": (373, 15), "Fling": (374, 10), "Psycho Shift": (375, 10),
    "Trump Card": (376, 5), "Heal Block": (377, 15), "Wring Out": (378, 5),
    "Power Trick": (379, 10), "Gastro Acid": (380, 10), "Lucky Chant": (381, 30),
    "Me First": (382, 20), "Copycat": (383, 20), "Power Swap": (384, 10),
    "Guard Swap": (385, 10), "Punishment": (386, 5), "Last Resort": (387, 5),
    "Worry Seed": (388, 10), "Sucker Punch": (389, 5), "Toxic Spikes": (390, 20),
    "Heart Swap": (391, 10), "Aqua Ring": (392, 20), "Magnet Rise": (393, 10),
    "Flare Blitz": (394, 15), "Force Palm": (395, 10), "Aura Sphere": (396, 20),
    "Rock Polish": (397, 20), "Poison Jab": (398, 20), "Dark Pulse": (399, 15),
    "Night Slash": (400, 15), "Aqua Tail": (401, 10), "Seed Bomb": (402, 15),
    "Air Slash": (403, 15), "X-Scissor": (404, 15), "Bug Buzz": (405, 10),
    "Dragon Pulse": (406, 10), "Dragon Rush": (407, 10), "Power Gem": (408, 20),
    "Drain Punch": (409, 10), "Vacuum Wave": (410, 30), "Focus Blast": (411, 5),
    "Energy Ball": (412, 10), "Brave Bird": (413, 15), "Earth Power": (414, 10),
    "Switcheroo": (415, 10), "Giga Impact": (416, 5), "Nasty Plot": (417, 20),
    "Bullet Punch": (418, 30), "Avalanche": (419, 10), "Ice Shard": (420, 30),
    "Shadow Claw": (421, 15), "Thunder Fang": (422, 15), "Ice Fang": (423, 15),
    "Fire Fang": (424, 15), "Shadow Sneak": (425, 30), "Mud Bomb": (426, 10),
    "Psycho Cut": (427, 20), "Zen Headbutt": (428, 15), "Mirror Shot": (429, 10),
    "Flash Cannon": (430, 10), "Rock Climb": (431, 20), "Defog": (432, 15),
    "Trick Room": (433, 5), "Draco Meteor": (434, 5), "Discharge": (435, 15),
    "Lava Plume": (436, 15), "Leaf Storm": (437, 5), "Power Whip": (438, 10),
    "Rock Wrecker": (439, 5), "Cross Poison": (440, 20), "Gunk Shot": (441, 5),
    "Iron Head": (442, 15), "Magnet Bomb": (443, 20), "Stone Edge": (444, 5),
    "Captivate": (445, 20), "Stealth Rock": (446, 20), "Grass Knot": (447, 20),
    "Chatter": (448, 20), "Judgment": (449, 10), "Bug Bite": (450, 20),
    "Charge Beam": (451, 10), "Wood Hammer": (452, 15), "Aqua Jet": (453, 20),
    "Attack Order": (454, 15), "Defend Order": (455, 10), "Heal Order": (456, 10),
    "Head Smash": (457, 5), "Double Hit": (458, 10), "Roar of Time": (459, 5),
    "Spacial Rend": (460, 5), "Lunar Dance": (461, 10), "Crush Grip": (462, 5),
    "Magma Storm": (463, 5), "Dark Void": (464, 10), "Seed Flare": (465, 5),
    "Ominous Wind": (466, 5), "Shadow Force": (467, 5),
}

SPECIES: Mapping[str, int] = MappingProxyType(_SPECIES)
ABILITIES: Mapping[str, int] = MappingProxyType(_ABILITIES)
MOVES: Mapping[str, Tuple[int, int]] = MappingProxyType(_MOVES)

# Reverse lookups for read-only inspection
SPECIES_NAMES: Mapping[int, str] = MappingProxyType({v: k for k, v in _SPECIES.items()})
ABILITY_NAMES: Mapping[int, str] = MappingProxyType({v: k for k, v in _ABILITIES.items()})
MOVE_NAMES: Mapping[int, str] = MappingProxyType({v[0]: k for k, v in _MOVES.items()})
