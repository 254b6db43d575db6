"""
Skill definitions for the skill-prerequisite graph.

Each entry has:
- id: unique identifier, also the key used in character skill maps
- name: display name
- category: gathering | crafting | construction | agriculture | combat | knowledge | social | industrial
- era: primitive | ancient | classical | medieval | renaissance | industrial | modern | atomic
- description
- prerequisites (optional): (skill id, minimum level) pairs

Pure data module; loaded once by world.skill_graph.default_skill_graph().
"""

SKILL_DEFINITIONS = [
    # ===== GATHERING & SURVIVAL (Primitive) =====
    {"id": "foraging", "name": "Foraging", "category": "gathering", "era": "primitive",
     "description": "Finding edible plants, berries, roots, and nuts"},
    {"id": "hunting", "name": "Hunting", "category": "gathering", "era": "primitive",
     "description": "Tracking and killing animals for food and materials"},
    {"id": "fishing", "name": "Fishing", "category": "gathering", "era": "primitive",
     "description": "Catching fish from rivers, lakes, and coasts"},
    {"id": "woodcutting", "name": "Woodcutting", "category": "gathering", "era": "primitive",
     "description": "Felling trees and processing timber"},
    {"id": "quarrying", "name": "Quarrying", "category": "gathering", "era": "primitive",
     "description": "Extracting stone and basic minerals"},

    # ===== BASIC CRAFTING (Primitive → Ancient) =====
    {"id": "stoneworking", "name": "Stoneworking", "category": "crafting", "era": "primitive",
     "description": "Shaping stone into tools and weapons",
     "prerequisites": [("quarrying", 20)]},
    {"id": "woodworking", "name": "Woodworking", "category": "crafting", "era": "primitive",
     "description": "Basic shaping of wood for tools and shelter",
     "prerequisites": [("woodcutting", 20)]},
    {"id": "pottery", "name": "Pottery", "category": "crafting", "era": "primitive",
     "description": "Shaping clay into vessels for storage and cooking"},
    {"id": "weaving", "name": "Weaving", "category": "crafting", "era": "primitive",
     "description": "Creating cloth, baskets, and rope from fibers"},
    {"id": "leatherworking", "name": "Leatherworking", "category": "crafting", "era": "primitive",
     "description": "Processing animal hides into leather",
     "prerequisites": [("hunting", 30)]},

    # ===== SPECIALIZED CRAFTS (Ancient) =====
    {"id": "carpentry", "name": "Carpentry", "category": "crafting", "era": "ancient",
     "description": "Advanced woodworking for buildings and furniture",
     "prerequisites": [("woodworking", 40)]},
    {"id": "masonry", "name": "Masonry", "category": "construction", "era": "ancient",
     "description": "Building with cut stone and mortar",
     "prerequisites": [("stoneworking", 40)]},
    {"id": "smelting", "name": "Smelting", "category": "crafting", "era": "ancient",
     "description": "Extracting metals from ore using heat"},
    {"id": "smithing", "name": "Smithing", "category": "crafting", "era": "ancient",
     "description": "Forging metal into tools, weapons, and armor",
     "prerequisites": [("smelting", 30)]},
    {"id": "tailoring", "name": "Tailoring", "category": "crafting", "era": "ancient",
     "description": "Making fitted clothing from cloth and leather",
     "prerequisites": [("weaving", 40)]},
    {"id": "ceramics", "name": "Ceramics", "category": "crafting", "era": "ancient",
     "description": "Advanced pottery with glazing and decoration",
     "prerequisites": [("pottery", 50)]},
    {"id": "toolmaking", "name": "Toolmaking", "category": "crafting", "era": "ancient",
     "description": "Creating specialized tools for various trades",
     "prerequisites": [("smithing", 30)]},

    # ===== CONSTRUCTION & ARCHITECTURE =====
    {"id": "construction", "name": "Construction", "category": "construction", "era": "ancient",
     "description": "Building houses, workshops, and basic structures",
     "prerequisites": [("carpentry", 30)]},
    {"id": "fortification", "name": "Fortification", "category": "construction", "era": "ancient",
     "description": "Building defensive walls, towers, and gates",
     "prerequisites": [("masonry", 40)]},
    {"id": "architecture", "name": "Architecture", "category": "construction", "era": "classical",
     "description": "Designing complex buildings and monuments",
     "prerequisites": [("construction", 50), ("mathematics", 40)]},
    {"id": "shipwright", "name": "Shipwright", "category": "construction", "era": "ancient",
     "description": "Building seaworthy vessels",
     "prerequisites": [("carpentry", 50)]},
    {"id": "siege_engineering", "name": "Siege Engineering", "category": "construction", "era": "classical",
     "description": "Building siege weapons and defensive structures",
     "prerequisites": [("fortification", 50), ("engineering", 40)]},

    # ===== AGRICULTURE & ANIMAL HUSBANDRY =====
    {"id": "farming", "name": "Farming", "category": "agriculture", "era": "ancient",
     "description": "Cultivating crops for food",
     "prerequisites": [("foraging", 30)]},
    {"id": "animalcare", "name": "Animal Husbandry", "category": "agriculture", "era": "ancient",
     "description": "Domesticating and breeding animals",
     "prerequisites": [("hunting", 30)]},
    {"id": "irrigation", "name": "Irrigation", "category": "agriculture", "era": "ancient",
     "description": "Building water systems for crops",
     "prerequisites": [("farming", 40)]},
    {"id": "herbalism", "name": "Herbalism", "category": "agriculture", "era": "primitive",
     "description": "Knowledge of medicinal plants",
     "prerequisites": [("foraging", 40)]},
    {"id": "brewing", "name": "Brewing", "category": "agriculture", "era": "ancient",
     "description": "Fermenting grains and fruits into alcohol",
     "prerequisites": [("farming", 30)]},
    {"id": "veterinary", "name": "Veterinary", "category": "agriculture", "era": "classical",
     "description": "Treating animal diseases and injuries",
     "prerequisites": [("animalcare", 50), ("medicine", 30)]},

    # ===== COMBAT SKILLS =====
    {"id": "melee", "name": "Melee Combat", "category": "combat", "era": "primitive",
     "description": "Fighting with clubs, spears, and close-range weapons"},
    {"id": "ranged", "name": "Ranged Combat", "category": "combat", "era": "primitive",
     "description": "Fighting with thrown weapons and bows"},
    {"id": "tactics", "name": "Tactics", "category": "combat", "era": "ancient",
     "description": "Military strategy and battlefield command",
     "prerequisites": [("melee", 40)]},
    {"id": "cavalry", "name": "Cavalry", "category": "combat", "era": "ancient",
     "description": "Fighting from horseback",
     "prerequisites": [("animalcare", 50), ("melee", 40)]},
    {"id": "archery", "name": "Archery", "category": "combat", "era": "ancient",
     "description": "Advanced bow techniques and accuracy",
     "prerequisites": [("ranged", 50)]},
    {"id": "naval_combat", "name": "Naval Combat", "category": "combat", "era": "classical",
     "description": "Fighting at sea, boarding, and naval tactics",
     "prerequisites": [("shipwright", 30), ("tactics", 40)]},
    {"id": "siege_warfare", "name": "Siege Warfare", "category": "combat", "era": "classical",
     "description": "Attacking and defending fortifications",
     "prerequisites": [("tactics", 50), ("siege_engineering", 30)]},

    # ===== KNOWLEDGE & SCIENCE (Classical) =====
    {"id": "literacy", "name": "Literacy", "category": "knowledge", "era": "ancient",
     "description": "Reading and writing"},
    {"id": "mathematics", "name": "Mathematics", "category": "knowledge", "era": "ancient",
     "description": "Numbers, geometry, and calculation",
     "prerequisites": [("literacy", 30)]},
    {"id": "astronomy", "name": "Astronomy", "category": "knowledge", "era": "ancient",
     "description": "Study of celestial bodies and navigation",
     "prerequisites": [("mathematics", 40)]},
    {"id": "medicine", "name": "Medicine", "category": "knowledge", "era": "ancient",
     "description": "Healing wounds and treating illness",
     "prerequisites": [("herbalism", 40)]},
    {"id": "surgery", "name": "Surgery", "category": "knowledge", "era": "classical",
     "description": "Cutting operations and bone-setting",
     "prerequisites": [("medicine", 60)]},
    {"id": "engineering", "name": "Engineering", "category": "knowledge", "era": "classical",
     "description": "Applied mathematics for building and machines",
     "prerequisites": [("mathematics", 50), ("construction", 40)]},
    {"id": "alchemy", "name": "Alchemy", "category": "knowledge", "era": "classical",
     "description": "Early chemistry, potions, and metallurgical experiments",
     "prerequisites": [("herbalism", 40), ("smelting", 40)]},
    {"id": "philosophy", "name": "Philosophy", "category": "knowledge", "era": "classical",
     "description": "Logic, ethics, and systematic thinking",
     "prerequisites": [("literacy", 60)]},
    {"id": "history", "name": "History", "category": "knowledge", "era": "ancient",
     "description": "Recording and studying the past",
     "prerequisites": [("literacy", 40)]},
    {"id": "law", "name": "Law", "category": "knowledge", "era": "ancient",
     "description": "Legal codes and justice systems",
     "prerequisites": [("literacy", 50)]},
    {"id": "theology", "name": "Theology", "category": "knowledge", "era": "ancient",
     "description": "Religious study and doctrine"},
    {"id": "navigation", "name": "Navigation", "category": "knowledge", "era": "classical",
     "description": "Finding your way by stars, maps, and instruments",
     "prerequisites": [("astronomy", 40), ("mathematics", 40)]},
    {"id": "cartography", "name": "Cartography", "category": "knowledge", "era": "classical",
     "description": "Making accurate maps",
     "prerequisites": [("navigation", 40), ("mathematics", 50)]},

    # ===== SOCIAL & GOVERNANCE =====
    {"id": "persuasion", "name": "Persuasion", "category": "social", "era": "primitive",
     "description": "Convincing others through speech"},
    {"id": "negotiation", "name": "Negotiation", "category": "social", "era": "ancient",
     "description": "Making deals and resolving disputes",
     "prerequisites": [("persuasion", 40)]},
    {"id": "diplomacy", "name": "Diplomacy", "category": "social", "era": "classical",
     "description": "Managing relations between nations",
     "prerequisites": [("negotiation", 50), ("literacy", 40)]},
    {"id": "trading", "name": "Trading", "category": "social", "era": "ancient",
     "description": "Buying and selling goods for profit"},
    {"id": "banking", "name": "Banking", "category": "social", "era": "medieval",
     "description": "Managing money, loans, and investments",
     "prerequisites": [("trading", 60), ("mathematics", 50)]},
    {"id": "administration", "name": "Administration", "category": "social", "era": "classical",
     "description": "Managing organizations and bureaucracies",
     "prerequisites": [("literacy", 50), ("law", 40)]},
    {"id": "espionage", "name": "Espionage", "category": "social", "era": "classical",
     "description": "Gathering secret information",
     "prerequisites": [("persuasion", 50)]},
    {"id": "propaganda", "name": "Propaganda", "category": "social", "era": "medieval",
     "description": "Influencing public opinion",
     "prerequisites": [("persuasion", 60), ("literacy", 50)]},

    # ===== MEDIEVAL SPECIALIZATIONS =====
    {"id": "blacksmithing", "name": "Blacksmithing", "category": "crafting", "era": "medieval",
     "description": "Advanced iron and steel working",
     "prerequisites": [("smithing", 60)]},
    {"id": "armorsmithing", "name": "Armorsmithing", "category": "crafting", "era": "medieval",
     "description": "Crafting metal armor and chainmail",
     "prerequisites": [("blacksmithing", 50)]},
    {"id": "weaponsmithing", "name": "Weaponsmithing", "category": "crafting", "era": "medieval",
     "description": "Forging high-quality weapons",
     "prerequisites": [("blacksmithing", 50)]},
    {"id": "glassmaking", "name": "Glassmaking", "category": "crafting", "era": "medieval",
     "description": "Creating glass objects and windows",
     "prerequisites": [("ceramics", 50), ("smelting", 40)]},
    {"id": "clockmaking", "name": "Clockmaking", "category": "crafting", "era": "medieval",
     "description": "Building mechanical timekeeping devices",
     "prerequisites": [("smithing", 60), ("mathematics", 50)]},
    {"id": "mining", "name": "Deep Mining", "category": "gathering", "era": "medieval",
     "description": "Extracting ore from deep underground",
     "prerequisites": [("quarrying", 50)]},
    {"id": "metallurgy", "name": "Metallurgy", "category": "knowledge", "era": "medieval",
     "description": "Scientific study of metals and alloys",
     "prerequisites": [("alchemy", 50), ("smithing", 50)]},
    {"id": "castle_building", "name": "Castle Building", "category": "construction", "era": "medieval",
     "description": "Designing and building massive fortifications",
     "prerequisites": [("architecture", 60), ("fortification", 60)]},

    # ===== RENAISSANCE ADVANCEMENTS =====
    {"id": "chemistry", "name": "Chemistry", "category": "knowledge", "era": "renaissance",
     "description": "Scientific study of substances and reactions",
     "prerequisites": [("alchemy", 70), ("mathematics", 50)]},
    {"id": "physics", "name": "Physics", "category": "knowledge", "era": "renaissance",
     "description": "Study of matter, energy, and forces",
     "prerequisites": [("mathematics", 60), ("philosophy", 40)]},
    {"id": "biology", "name": "Biology", "category": "knowledge", "era": "renaissance",
     "description": "Study of living organisms",
     "prerequisites": [("medicine", 50), ("herbalism", 50)]},
    {"id": "anatomy", "name": "Anatomy", "category": "knowledge", "era": "renaissance",
     "description": "Detailed knowledge of body structure",
     "prerequisites": [("surgery", 50), ("biology", 40)]},
    {"id": "optics", "name": "Optics", "category": "knowledge", "era": "renaissance",
     "description": "Study of light and lenses",
     "prerequisites": [("glassmaking", 50), ("physics", 40)]},
    {"id": "printing", "name": "Printing", "category": "crafting", "era": "renaissance",
     "description": "Mass-producing written materials",
     "prerequisites": [("literacy", 60), ("metallurgy", 40)]},
    {"id": "gunsmithing", "name": "Gunsmithing", "category": "crafting", "era": "renaissance",
     "description": "Building firearms and cannons",
     "prerequisites": [("blacksmithing", 60), ("chemistry", 40)]},
    {"id": "explosives", "name": "Explosives", "category": "knowledge", "era": "renaissance",
     "description": "Creating and using gunpowder and bombs",
     "prerequisites": [("chemistry", 50)]},
    {"id": "ballistics", "name": "Ballistics", "category": "knowledge", "era": "renaissance",
     "description": "Science of projectile motion",
     "prerequisites": [("physics", 50), ("mathematics", 60)]},
    {"id": "fortification_modern", "name": "Modern Fortification", "category": "construction", "era": "renaissance",
     "description": "Star forts and cannon-resistant walls",
     "prerequisites": [("castle_building", 50), ("ballistics", 40)]},
    {"id": "naval_architecture", "name": "Naval Architecture", "category": "construction", "era": "renaissance",
     "description": "Designing large sailing warships",
     "prerequisites": [("shipwright", 70), ("engineering", 50)]},

    # ===== INDUSTRIAL REVOLUTION =====
    {"id": "mechanics", "name": "Mechanics", "category": "knowledge", "era": "industrial",
     "description": "Study of machines and motion",
     "prerequisites": [("physics", 60), ("engineering", 60)]},
    {"id": "thermodynamics", "name": "Thermodynamics", "category": "knowledge", "era": "industrial",
     "description": "Study of heat and energy",
     "prerequisites": [("physics", 70), ("chemistry", 50)]},
    {"id": "steam_engineering", "name": "Steam Engineering", "category": "industrial", "era": "industrial",
     "description": "Building and operating steam engines",
     "prerequisites": [("thermodynamics", 50), ("blacksmithing", 60)]},
    {"id": "machine_tools", "name": "Machine Tools", "category": "industrial", "era": "industrial",
     "description": "Precision manufacturing equipment",
     "prerequisites": [("toolmaking", 70), ("mechanics", 50)]},
    {"id": "industrial_chemistry", "name": "Industrial Chemistry", "category": "industrial", "era": "industrial",
     "description": "Large-scale chemical production",
     "prerequisites": [("chemistry", 70)]},
    {"id": "steel_production", "name": "Steel Production", "category": "industrial", "era": "industrial",
     "description": "Mass-producing high-quality steel",
     "prerequisites": [("metallurgy", 60), ("industrial_chemistry", 40)]},
    {"id": "railways", "name": "Railways", "category": "industrial", "era": "industrial",
     "description": "Building and operating rail networks",
     "prerequisites": [("steam_engineering", 50), ("steel_production", 40)]},
    {"id": "telegraphy", "name": "Telegraphy", "category": "industrial", "era": "industrial",
     "description": "Long-distance electrical communication",
     "prerequisites": [("physics", 60)]},
    {"id": "photography", "name": "Photography", "category": "industrial", "era": "industrial",
     "description": "Capturing images with light",
     "prerequisites": [("optics", 50), ("chemistry", 50)]},

    # ===== ELECTRICAL & MODERN =====
    {"id": "electrical_engineering", "name": "Electrical Engineering", "category": "industrial", "era": "modern",
     "description": "Harnessing electricity for power and machines",
     "prerequisites": [("physics", 70), ("mechanics", 60)]},
    {"id": "internal_combustion", "name": "Internal Combustion", "category": "industrial", "era": "modern",
     "description": "Engines powered by burning fuel",
     "prerequisites": [("thermodynamics", 60), ("industrial_chemistry", 50)]},
    {"id": "automotive", "name": "Automotive", "category": "industrial", "era": "modern",
     "description": "Designing and building motor vehicles",
     "prerequisites": [("internal_combustion", 50), ("steel_production", 50)]},
    {"id": "aviation", "name": "Aviation", "category": "industrial", "era": "modern",
     "description": "Building and flying aircraft",
     "prerequisites": [("internal_combustion", 60), ("physics", 70)]},
    {"id": "radio", "name": "Radio", "category": "industrial", "era": "modern",
     "description": "Wireless communication",
     "prerequisites": [("electrical_engineering", 50)]},
    {"id": "electronics", "name": "Electronics", "category": "industrial", "era": "modern",
     "description": "Controlling electrical signals",
     "prerequisites": [("electrical_engineering", 60)]},
    {"id": "radar", "name": "Radar", "category": "industrial", "era": "modern",
     "description": "Detection using radio waves",
     "prerequisites": [("radio", 60), ("electronics", 50)]},
    {"id": "assembly_line", "name": "Assembly Line", "category": "industrial", "era": "modern",
     "description": "Mass production techniques",
     "prerequisites": [("machine_tools", 60)]},
    {"id": "tank_warfare", "name": "Tank Warfare", "category": "combat", "era": "modern",
     "description": "Fighting with armored vehicles",
     "prerequisites": [("automotive", 50), ("tactics", 60)]},
    {"id": "air_combat", "name": "Air Combat", "category": "combat", "era": "modern",
     "description": "Fighting in the skies",
     "prerequisites": [("aviation", 60), ("tactics", 50)]},
    {"id": "submarine_warfare", "name": "Submarine Warfare", "category": "combat", "era": "modern",
     "description": "Undersea combat and stealth",
     "prerequisites": [("naval_architecture", 60), ("electronics", 40)]},

    # ===== ATOMIC AGE =====
    {"id": "nuclear_physics", "name": "Nuclear Physics", "category": "knowledge", "era": "atomic",
     "description": "Study of atomic nuclei and radiation",
     "prerequisites": [("physics", 80), ("chemistry", 70)]},
    {"id": "nuclear_engineering", "name": "Nuclear Engineering", "category": "industrial", "era": "atomic",
     "description": "Building nuclear reactors",
     "prerequisites": [("nuclear_physics", 60), ("electrical_engineering", 70)]},
    {"id": "nuclear_weapons", "name": "Nuclear Weapons", "category": "combat", "era": "atomic",
     "description": "Building atomic and hydrogen bombs",
     "prerequisites": [("nuclear_physics", 70), ("explosives", 60)]},
    {"id": "rocketry", "name": "Rocketry", "category": "industrial", "era": "atomic",
     "description": "Building rockets and missiles",
     "prerequisites": [("aviation", 70), ("ballistics", 70)]},
    {"id": "computing", "name": "Computing", "category": "knowledge", "era": "atomic",
     "description": "Building and programming computers",
     "prerequisites": [("electronics", 70), ("mathematics", 80)]},
    {"id": "missile_systems", "name": "Missile Systems", "category": "combat", "era": "atomic",
     "description": "Guided missiles and ICBMs",
     "prerequisites": [("rocketry", 60), ("electronics", 60)]},
    {"id": "jet_propulsion", "name": "Jet Propulsion", "category": "industrial", "era": "atomic",
     "description": "Jet engines and supersonic flight",
     "prerequisites": [("aviation", 70), ("thermodynamics", 70)]},
    {"id": "nuclear_delivery", "name": "Nuclear Delivery", "category": "combat", "era": "atomic",
     "description": "Deploying nuclear weapons via bombers or missiles",
     "prerequisites": [("nuclear_weapons", 50), ("missile_systems", 50)]},
]
