"""
Technology tree definitions.

Technologies are not bought: a territory's research on a tech only advances
once enough of its living population has practiced the listed skills
(see systems.tech_requirements). Each entry has:
- tech_id, name, description
- era: stone_age | bronze_age | iron_age | medieval
- category: military | economy | society | science
- prerequisites: tech ids that must already be researched
- knowledge_cost: research progress needed to complete
- required_skills: population thresholds, each {"skill", and any of
  "min_expert_percent", "min_skilled_percent", "min_average_level"}
- unlocks: informational, what the tech opens up
- is_innate (optional): known by every population once its prerequisites are
"""

TECH_TREE = [

    # ===== STONE AGE (Starting Era) =====

    # Basic survival
    {
        "tech_id": "fire_making",
        "name": "Fire Making",
        "description": "Control of fire for warmth, cooking, and protection",
        "era": "stone_age",
        "category": "science",
        "prerequisites": [],
        "knowledge_cost": 20,
        "required_skills": [{"skill": "woodcutting", "min_skilled_percent": 10}],
        "unlocks": [
            {"type": "bonus", "id": "food_preservation", "description": "+10% food preservation"},
            {"type": "bonus", "id": "happiness_warmth", "description": "+5 happiness from warmth"},
        ],
    },
    {
        "tech_id": "stone_tools",
        "name": "Stone Tools",
        "description": "Crafting basic tools from stone for hunting and building",
        "era": "stone_age",
        "category": "economy",
        "prerequisites": [],
        "knowledge_cost": 15,
        "required_skills": [{"skill": "stoneworking", "min_skilled_percent": 10}],
        "unlocks": [
            {"type": "bonus", "id": "tool_efficiency", "description": "+15% worker productivity"},
            {"type": "action", "id": "craft_tools", "description": "Can craft basic tools"},
        ],
    },
    {
        "tech_id": "hunting",
        "name": "Hunting Techniques",
        "description": "Organized group hunting for larger game",
        "era": "stone_age",
        "category": "economy",
        "prerequisites": ["stone_tools"],
        "knowledge_cost": 25,
        "required_skills": [{"skill": "hunting", "min_skilled_percent": 15}],
        "unlocks": [
            {"type": "bonus", "id": "hunting_food", "description": "+20% food from hunting"},
            {"type": "unit", "id": "hunter", "description": "Can train hunters"},
        ],
    },
    {
        "tech_id": "gathering",
        "name": "Gathering Knowledge",
        "description": "Understanding of edible plants and seasonal patterns",
        "era": "stone_age",
        "category": "economy",
        "prerequisites": [],
        "knowledge_cost": 20,
        "is_innate": True,
        "required_skills": [],
        "unlocks": [
            {"type": "bonus", "id": "food_gathering", "description": "+15% food from gathering"},
            {"type": "action", "id": "forage", "description": "More effective foraging"},
        ],
    },
    {
        "tech_id": "primitive_shelter",
        "name": "Primitive Shelter",
        "description": "Construction of basic shelters from natural materials",
        "era": "stone_age",
        "category": "economy",
        "prerequisites": [],
        "knowledge_cost": 20,
        "required_skills": [{"skill": "woodworking", "min_skilled_percent": 10}],
        "unlocks": [
            {"type": "building", "id": "hut", "description": "Can build simple huts"},
            {"type": "bonus", "id": "shelter_happiness", "description": "+10 happiness"},
        ],
    },
    {
        "tech_id": "tribal_organization",
        "name": "Tribal Organization",
        "description": "Basic social structures and leadership",
        "era": "stone_age",
        "category": "society",
        "prerequisites": [],
        "knowledge_cost": 30,
        "required_skills": [{"skill": "persuasion", "min_average_level": 20}],
        "unlocks": [
            {"type": "action", "id": "establish_council", "description": "Can form elder council"},
            {"type": "action", "id": "establish_chief", "description": "Can appoint chief"},
        ],
    },
    {
        "tech_id": "oral_tradition",
        "name": "Oral Tradition",
        "description": "Passing knowledge through stories and songs",
        "era": "stone_age",
        "category": "society",
        "prerequisites": ["tribal_organization"],
        "knowledge_cost": 25,
        "required_skills": [{"skill": "persuasion", "min_skilled_percent": 15}],
        "unlocks": [
            {"type": "bonus", "id": "knowledge_retention", "description": "-50% knowledge decay"},
            {"type": "action", "id": "create_tradition", "description": "Can establish traditions"},
        ],
    },
    {
        "tech_id": "primitive_warfare",
        "name": "Primitive Warfare",
        "description": "Basic combat techniques with clubs and spears",
        "era": "stone_age",
        "category": "military",
        "prerequisites": ["stone_tools", "hunting"],
        "knowledge_cost": 30,
        "required_skills": [
            {"skill": "melee", "min_skilled_percent": 10},
            {"skill": "hunting", "min_skilled_percent": 10},
        ],
        "unlocks": [
            {"type": "unit", "id": "militia", "description": "Can raise militia"},
            {"type": "action", "id": "raid", "description": "Can raid other territories"},
        ],
    },

    # ===== BRONZE AGE =====

    {
        "tech_id": "agriculture",
        "name": "Agriculture",
        "description": "Cultivation of crops and planned farming",
        "era": "bronze_age",
        "category": "economy",
        "prerequisites": ["gathering", "stone_tools"],
        "knowledge_cost": 50,
        "required_skills": [
            {"skill": "farming", "min_skilled_percent": 15},
            {"skill": "foraging", "min_expert_percent": 2},
        ],
        "unlocks": [
            {"type": "building", "id": "farm", "description": "Can build farms"},
            {"type": "bonus", "id": "food_production", "description": "+100% food production"},
        ],
    },
    {
        "tech_id": "animal_husbandry",
        "name": "Animal Husbandry",
        "description": "Domestication of animals for food and labor",
        "era": "bronze_age",
        "category": "economy",
        "prerequisites": ["hunting", "agriculture"],
        "knowledge_cost": 45,
        "required_skills": [{"skill": "animalcare", "min_skilled_percent": 15}],
        "unlocks": [
            {"type": "building", "id": "pasture", "description": "Can build pastures"},
            {"type": "bonus", "id": "livestock_food", "description": "+50% food from livestock"},
        ],
    },
    {
        "tech_id": "bronze_working",
        "name": "Bronze Working",
        "description": "Smelting copper and tin to create bronze",
        "era": "bronze_age",
        "category": "science",
        "prerequisites": ["fire_making", "stone_tools"],
        "knowledge_cost": 60,
        "required_skills": [
            {"skill": "smelting", "min_skilled_percent": 10},
            {"skill": "smithing", "min_average_level": 30},
        ],
        "unlocks": [
            {"type": "building", "id": "forge", "description": "Can build bronze forge"},
            {"type": "bonus", "id": "tool_quality", "description": "+30% tool effectiveness"},
        ],
    },
    {
        "tech_id": "writing",
        "name": "Writing",
        "description": "Recording information through symbols and scripts",
        "era": "bronze_age",
        "category": "society",
        "prerequisites": ["oral_tradition"],
        "knowledge_cost": 70,
        "required_skills": [{"skill": "literacy", "min_skilled_percent": 10}],
        "unlocks": [
            {"type": "building", "id": "academy", "description": "Can establish academies"},
            {"type": "bonus", "id": "research_speed", "description": "+25% research speed"},
        ],
    },
    {
        "tech_id": "trade",
        "name": "Trade",
        "description": "Organized exchange of goods between communities",
        "era": "bronze_age",
        "category": "economy",
        "prerequisites": ["agriculture", "tribal_organization"],
        "knowledge_cost": 50,
        "required_skills": [
            {"skill": "trading", "min_skilled_percent": 10},
            {"skill": "negotiation", "min_average_level": 25},
        ],
        "unlocks": [
            {"type": "building", "id": "market", "description": "Can build markets"},
            {"type": "action", "id": "establish_trade_route", "description": "Can establish trade routes"},
        ],
    },
    {
        "tech_id": "construction",
        "name": "Construction",
        "description": "Advanced building techniques with mud brick and wood",
        "era": "bronze_age",
        "category": "economy",
        "prerequisites": ["primitive_shelter", "bronze_working"],
        "knowledge_cost": 55,
        "required_skills": [
            {"skill": "construction", "min_skilled_percent": 15},
            {"skill": "carpentry", "min_skilled_percent": 10},
        ],
        "unlocks": [
            {"type": "building", "id": "workshop", "description": "Can build workshops"},
            {"type": "building", "id": "wooden_wall", "description": "Can build wooden walls"},
        ],
    },
    {
        "tech_id": "military_training",
        "name": "Military Training",
        "description": "Professional soldiers and organized tactics",
        "era": "bronze_age",
        "category": "military",
        "prerequisites": ["primitive_warfare", "bronze_working"],
        "knowledge_cost": 60,
        "required_skills": [
            {"skill": "melee", "min_expert_percent": 3},
            {"skill": "tactics", "min_skilled_percent": 5},
        ],
        "unlocks": [
            {"type": "building", "id": "barracks", "description": "Can build barracks"},
            {"type": "unit", "id": "infantry", "description": "Can train infantry"},
        ],
    },
    {
        "tech_id": "horse_riding",
        "name": "Horse Riding",
        "description": "Domestication and riding of horses",
        "era": "bronze_age",
        "category": "military",
        "prerequisites": ["animal_husbandry"],
        "knowledge_cost": 55,
        "required_skills": [
            {"skill": "animalcare", "min_expert_percent": 3},
            {"skill": "cavalry", "min_skilled_percent": 5},
        ],
        "unlocks": [
            {"type": "unit", "id": "cavalry", "description": "Can train cavalry"},
            {"type": "bonus", "id": "movement_speed", "description": "+50% army movement speed"},
        ],
    },
    {
        "tech_id": "law_codes",
        "name": "Law Codes",
        "description": "Written laws and formal justice systems",
        "era": "bronze_age",
        "category": "society",
        "prerequisites": ["writing", "tribal_organization"],
        "knowledge_cost": 65,
        "required_skills": [
            {"skill": "law", "min_skilled_percent": 5},
            {"skill": "literacy", "min_skilled_percent": 15},
        ],
        "unlocks": [
            {"type": "action", "id": "establish_democracy", "description": "Can establish democracy"},
            {"type": "bonus", "id": "stability", "description": "+15% faction stability"},
        ],
    },

    # ===== IRON AGE =====

    {
        "tech_id": "iron_working",
        "name": "Iron Working",
        "description": "Smelting and forging iron tools and weapons",
        "era": "iron_age",
        "category": "science",
        "prerequisites": ["bronze_working"],
        "knowledge_cost": 80,
        "required_skills": [
            {"skill": "smelting", "min_expert_percent": 3},
            {"skill": "smithing", "min_skilled_percent": 20},
        ],
        "unlocks": [
            {"type": "bonus", "id": "weapon_quality", "description": "+50% military effectiveness"},
            {"type": "bonus", "id": "tool_durability", "description": "+40% tool durability"},
        ],
    },
    {
        "tech_id": "archery",
        "name": "Advanced Archery",
        "description": "Composite bows and organized archer units",
        "era": "iron_age",
        "category": "military",
        "prerequisites": ["military_training", "iron_working"],
        "knowledge_cost": 70,
        "required_skills": [
            {"skill": "ranged", "min_skilled_percent": 20},
            {"skill": "archery", "min_skilled_percent": 10},
        ],
        "unlocks": [
            {"type": "unit", "id": "archer", "description": "Can train archer units"},
            {"type": "bonus", "id": "ranged_combat", "description": "+30% ranged damage"},
        ],
    },
    {
        "tech_id": "masonry",
        "name": "Masonry",
        "description": "Building with cut stone blocks",
        "era": "iron_age",
        "category": "economy",
        "prerequisites": ["construction", "iron_working"],
        "knowledge_cost": 75,
        "required_skills": [
            {"skill": "masonry", "min_skilled_percent": 15},
            {"skill": "stoneworking", "min_expert_percent": 3},
        ],
        "unlocks": [
            {"type": "building", "id": "stone_wall", "description": "Can build stone walls"},
            {"type": "bonus", "id": "building_durability", "description": "+50% building health"},
        ],
    },
    {
        "tech_id": "siege_warfare",
        "name": "Siege Warfare",
        "description": "Tactics and equipment for attacking fortifications",
        "era": "iron_age",
        "category": "military",
        "prerequisites": ["military_training", "construction"],
        "knowledge_cost": 85,
        "required_skills": [
            {"skill": "siege_engineering", "min_skilled_percent": 5},
            {"skill": "tactics", "min_expert_percent": 2},
        ],
        "unlocks": [
            {"type": "unit", "id": "siege", "description": "Can build siege equipment"},
            {"type": "action", "id": "lay_siege", "description": "Can lay siege to fortifications"},
        ],
    },
    {
        "tech_id": "currency",
        "name": "Currency",
        "description": "Standardized money for trade and taxation",
        "era": "iron_age",
        "category": "economy",
        "prerequisites": ["trade", "iron_working"],
        "knowledge_cost": 70,
        "required_skills": [
            {"skill": "trading", "min_expert_percent": 3},
            {"skill": "mathematics", "min_skilled_percent": 10},
        ],
        "unlocks": [
            {"type": "bonus", "id": "trade_efficiency", "description": "+40% trade income"},
            {"type": "action", "id": "set_tax_rate", "description": "Can adjust taxation"},
        ],
    },
    {
        "tech_id": "philosophy",
        "name": "Philosophy",
        "description": "Systematic study of knowledge and ethics",
        "era": "iron_age",
        "category": "science",
        "prerequisites": ["writing", "law_codes"],
        "knowledge_cost": 90,
        "required_skills": [
            {"skill": "philosophy", "min_skilled_percent": 5},
            {"skill": "literacy", "min_expert_percent": 3},
        ],
        "unlocks": [
            {"type": "bonus", "id": "research_boost", "description": "+35% research effectiveness"},
            {"type": "action", "id": "establish_theocracy", "description": "Can establish theocracy"},
        ],
    },
    {
        "tech_id": "engineering",
        "name": "Engineering",
        "description": "Applied mathematics and mechanical principles",
        "era": "iron_age",
        "category": "science",
        "prerequisites": ["masonry", "philosophy"],
        "knowledge_cost": 95,
        "required_skills": [
            {"skill": "engineering", "min_skilled_percent": 5},
            {"skill": "mathematics", "min_expert_percent": 3},
        ],
        "unlocks": [
            {"type": "bonus", "id": "construction_speed", "description": "+50% building speed"},
            {"type": "building", "id": "aqueduct", "description": "Can build aqueducts"},
        ],
    },
    {
        "tech_id": "medicine",
        "name": "Medicine",
        "description": "Understanding of diseases and healing",
        "era": "iron_age",
        "category": "science",
        "prerequisites": ["philosophy"],
        "knowledge_cost": 80,
        "required_skills": [
            {"skill": "medicine", "min_skilled_percent": 5},
            {"skill": "herbalism", "min_expert_percent": 3},
        ],
        "unlocks": [
            {"type": "bonus", "id": "death_rate", "description": "-30% death rate"},
            {"type": "action", "id": "quarantine", "description": "Can quarantine diseases"},
        ],
    },

    # ===== MEDIEVAL =====

    {
        "tech_id": "steel_working",
        "name": "Steel Working",
        "description": "Production of high-quality steel",
        "era": "medieval",
        "category": "science",
        "prerequisites": ["iron_working", "engineering"],
        "knowledge_cost": 100,
        "required_skills": [
            {"skill": "smithing", "min_expert_percent": 5},
            {"skill": "metallurgy", "min_skilled_percent": 5},
        ],
        "unlocks": [
            {"type": "bonus", "id": "weapon_mastery", "description": "+75% military power"},
            {"type": "bonus", "id": "armor_quality", "description": "+50% unit defense"},
        ],
    },
    {
        "tech_id": "castle_building",
        "name": "Castle Building",
        "description": "Advanced defensive fortification architecture",
        "era": "medieval",
        "category": "military",
        "prerequisites": ["masonry", "siege_warfare"],
        "knowledge_cost": 110,
        "required_skills": [
            {"skill": "castle_building", "min_skilled_percent": 3},
            {"skill": "fortification", "min_expert_percent": 3},
        ],
        "unlocks": [
            {"type": "building", "id": "castle", "description": "Can build castles"},
            {"type": "bonus", "id": "defense_bonus", "description": "+100% fortification defense"},
        ],
    },
    {
        "tech_id": "guilds",
        "name": "Guilds",
        "description": "Organized craftsmen and professional associations",
        "era": "medieval",
        "category": "economy",
        "prerequisites": ["currency", "law_codes"],
        "knowledge_cost": 90,
        "required_skills": [
            {"skill": "trading", "min_expert_percent": 5},
            {"skill": "administration", "min_skilled_percent": 5},
        ],
        "unlocks": [
            {"type": "bonus", "id": "production", "description": "+50% workshop output"},
            {"type": "action", "id": "class_reform", "description": "Can reform social classes"},
        ],
    },
    {
        "tech_id": "banking",
        "name": "Banking",
        "description": "Financial institutions and credit systems",
        "era": "medieval",
        "category": "economy",
        "prerequisites": ["guilds", "currency"],
        "knowledge_cost": 100,
        "required_skills": [
            {"skill": "banking", "min_skilled_percent": 3},
            {"skill": "mathematics", "min_expert_percent": 5},
        ],
        "unlocks": [
            {"type": "bonus", "id": "wealth_growth", "description": "+25% passive wealth growth"},
            {"type": "bonus", "id": "trade_range", "description": "+100% trade route distance"},
        ],
    },
    {
        "tech_id": "heavy_cavalry",
        "name": "Heavy Cavalry",
        "description": "Armored mounted knights",
        "era": "medieval",
        "category": "military",
        "prerequisites": ["horse_riding", "steel_working"],
        "knowledge_cost": 105,
        "required_skills": [
            {"skill": "cavalry", "min_expert_percent": 3},
            {"skill": "armorsmithing", "min_skilled_percent": 5},
        ],
        "unlocks": [
            {"type": "unit", "id": "knight", "description": "Can train knights"},
            {"type": "bonus", "id": "cavalry_charge", "description": "+100% cavalry attack"},
        ],
    },
    {
        "tech_id": "advanced_fortifications",
        "name": "Advanced Fortifications",
        "description": "Complex defensive systems with multiple walls",
        "era": "medieval",
        "category": "military",
        "prerequisites": ["castle_building", "engineering"],
        "knowledge_cost": 120,
        "required_skills": [
            {"skill": "fortification", "min_expert_percent": 5},
            {"skill": "engineering", "min_expert_percent": 2},
        ],
        "unlocks": [
            {"type": "building", "id": "fortress", "description": "Can build fortresses"},
            {"type": "bonus", "id": "siege_resistance", "description": "+75% siege resistance"},
        ],
    },
    {
        "tech_id": "universities",
        "name": "Universities",
        "description": "Centers of higher learning and research",
        "era": "medieval",
        "category": "science",
        "prerequisites": ["philosophy", "guilds"],
        "knowledge_cost": 110,
        "required_skills": [
            {"skill": "philosophy", "min_expert_percent": 3},
            {"skill": "literacy", "min_expert_percent": 8, "min_average_level": 50},
        ],
        "unlocks": [
            {"type": "building", "id": "university", "description": "Can build universities"},
            {"type": "bonus", "id": "research_mastery", "description": "+50% research speed"},
        ],
    },
    {
        "tech_id": "nationalism",
        "name": "Nationalism",
        "description": "Unified national identity and loyalty",
        "era": "medieval",
        "category": "society",
        "prerequisites": ["law_codes", "philosophy"],
        "knowledge_cost": 95,
        "required_skills": [
            {"skill": "propaganda", "min_skilled_percent": 5},
            {"skill": "diplomacy", "min_expert_percent": 2},
        ],
        "unlocks": [
            {"type": "bonus", "id": "unity", "description": "-50% rebellion risk"},
            {"type": "bonus", "id": "morale", "description": "+25% military morale"},
        ],
    },
]
