"""Prompt templates and lookup tables for product innovation concepts."""

from __future__ import annotations

from string import Template

DEFAULT_BRAND = "ARM & HAMMER"

# --- Categories offered in the UI ---

CATEGORIES: dict[str, str] = {
    "laundry": "LAUNDRY",
    "oral-care": "ORAL CARE",
    "personal-care": "PERSONAL CARE",
    "health": "HEALTH",
    "home-care": "HOME CARE",
    "pet-care": "PET CARE",
    "sexual-wellness": "SEXUAL WELLNESS",
    "all": "ALL CATEGORIES",
}

# --- Brand table ---

BRANDS_BY_CATEGORY: dict[str, list[str]] = {
    "laundry": ["ARM & HAMMER", "OXICLEAN", "XTRA"],
    "oral-care": ["ARM & HAMMER", "THERABREATH", "WATERPIK", "SPINBRUSH", "ORAJEL"],
    "personal-care": ["BATISTE", "NAIR", "FLAWLESS", "ARM & HAMMER"],
    "health": ["VITAFUSION", "L'IL CRITTERS", "ZICAM"],
    "home-care": ["ARM & HAMMER", "KABOOM", "OXICLEAN"],
    "pet-care": ["ARM & HAMMER"],
    "sexual-wellness": ["TROJAN", "FIRST RESPONSE"],
}

# --- Innovation descriptors ---

INNOVATIONS: list[dict[str, str]] = [
    {"tech": "AI-powered personalization", "desc": "adapts to your unique needs"},
    {"tech": "biodegradable capsules", "desc": "dissolves completely in water"},
    {"tech": "microbiome technology", "desc": "supports natural balance"},
    {"tech": "carbon-negative formula", "desc": "removes CO2 from atmosphere"},
    {"tech": "smart sensor technology", "desc": "tracks usage and effectiveness"},
    {"tech": "waterless concentrate", "desc": "just add water at home"},
    {"tech": "probiotic-enhanced", "desc": "promotes healthy bacteria"},
    {"tech": "plant-based enzymes", "desc": "100% natural cleaning power"},
    {"tech": "zero-waste refills", "desc": "reusable forever packaging"},
    {"tech": "UV-activated formula", "desc": "powered by sunlight"},
]

PRODUCT_NAMES: dict[str, list[str]] = {
    "laundry": ["UltraClean", "FreshWave", "PureWash", "EcoBoost", "SmartClean"],
    "oral-care": ["SmileBright", "FreshGuard", "TeethShield", "OralPure", "MouthCare"],
    "personal-care": ["SkinGlow", "BodyFresh", "PureTouch", "DermaCare", "Refresh"],
    "health": ["VitaBoost", "HealthPlus", "NutriCore", "WellnessMax", "LifeForce"],
    "home-care": ["CleanMaster", "HomePure", "SparkleClean", "FreshHome", "PowerClean"],
    "pet-care": ["PetFresh", "FurCare", "PawPure", "AnimalWell", "PetGuard"],
    "sexual-wellness": ["IntimaCare", "LovePlus", "PureTouch", "WellnessPlus", "CareMax"],
}

FALLBACK_PRODUCT_NAME = "Innovation"

# --- Concept copy templates ---

IMAGE_PROMPT = Template(
    "Professional product photography: $brand $category product bottle with $tech, "
    "modern minimalist packaging, white background, studio lighting, "
    "photorealistic, commercial photography"
)

MARKET_DISRUPTION = Template("First $category product that $desc")

CONSUMER_INSIGHT = Template(
    "Modern consumers want $category products that are both effective and sustainable"
)

INGREDIENTS = Template("Advanced $tech complex")

CONCEPT_FEATURES: list[Template] = [
    Template("Uses $tech"),
    Template("Clinically proven effectiveness"),
    Template("Eco-friendly packaging"),
]

USAGE = "Use as directed for best results"
PRICE = "$19.99 - 24oz"
SUSTAINABILITY = "100% recyclable packaging, carbon neutral production"

# --- Client-side display names ---

NAME_PREFIXES = ["Ultra", "Pro", "Max", "Elite", "Pure", "Advanced", "Smart", "Eco", "Bio"]
NAME_SUFFIXES = ["Plus", "Pro", "X", "360", "Complete", "Total", "Premium", "Elite"]

NAME_MIDDLES: dict[str, list[str]] = {
    "laundry": ["Clean", "Fresh", "Bright", "Power", "Care"],
    "oral-care": ["White", "Fresh", "Guard", "Pro", "Care"],
    "personal-care": ["Smooth", "Glow", "Fresh", "Care", "Pure"],
    "health": ["Vita", "Health", "Boost", "Daily", "Complete"],
    "home-care": ["Clean", "Fresh", "Shine", "Power", "Guard"],
    "pet-care": ["Pet", "Fresh", "Care", "Control", "Guard"],
    "sexual-wellness": ["Care", "Plus", "Pro", "Comfort", "Natural"],
}

# --- Client-side feature lists ---

BASE_FEATURES = [
    "Dermatologist tested",
    "100% recyclable packaging",
    "Made with renewable energy",
    "Clinically proven effectiveness",
    "Safe for sensitive skin",
]

CATEGORY_FEATURES: dict[str, list[str]] = {
    "laundry": [
        "Removes 99.9% of stains",
        "Works in cold water",
        "Concentrated formula - 50% less plastic",
        "HE compatible",
        "Fresh scent lasts 30 days",
    ],
    "oral-care": [
        "Whitens teeth in 7 days",
        "Enamel safe formula",
        "Fights bad breath for 24 hours",
        "Recommended by dentists",
        "Fluoride enhanced protection",
    ],
    "personal-care": [
        "pH balanced formula",
        "48-hour protection",
        "No white residue",
        "Aluminum-free option",
        "Infused with vitamins",
    ],
    "health": [
        "Third-party tested",
        "Non-GMO verified",
        "Gluten-free formula",
        "No artificial colors",
        "Enhanced absorption",
    ],
    "home-care": [
        "Kills 99.9% of germs",
        "No harsh chemicals",
        "Safe for all surfaces",
        "Fresh scent technology",
        "Streak-free formula",
    ],
    "pet-care": [
        "Veterinarian approved",
        "Controls odor for 7 days",
        "Low dust formula",
        "99% dust free",
        "Natural ingredients",
    ],
    "sexual-wellness": [
        "FDA approved",
        "Latex-free options",
        "Hypoallergenic",
        "Precision technology",
        "Discrete packaging",
    ],
}

# --- Placeholder gradients (top, bottom) ---

PLACEHOLDER_GRADIENTS: dict[str, tuple[tuple[int, int, int], tuple[int, int, int]]] = {
    "laundry": ((96, 165, 250), (139, 92, 246)),
    "oral-care": ((45, 212, 191), (59, 130, 246)),
    "personal-care": ((244, 114, 182), (168, 85, 247)),
    "health": ((74, 222, 128), (16, 185, 129)),
    "home-care": ((251, 191, 36), (249, 115, 22)),
    "pet-care": ((163, 230, 53), (34, 197, 94)),
    "sexual-wellness": ((248, 113, 113), (236, 72, 153)),
}

DEFAULT_GRADIENT = ((96, 165, 250), (168, 85, 247))

# --- Stock tool images served by /api/images ---

TOOL_IMAGES: dict[str, str] = {
    "innovation-inspiration-tool": "https://images.unsplash.com/photo-1620712943543-bcc4688e7485",
    "formula-generator-tool": "https://images.unsplash.com/photo-1532187863486-abf9dbad1b69",
    "patent-analyzer-tool": "https://images.unsplash.com/photo-1507003211169-0a1dd7228f2d",
    "stability-predictor-tool": "https://images.unsplash.com/photo-1532094349884-543bc11b234d",
    "package-sustainability-tool": "https://images.unsplash.com/photo-1536147210925-5cb7a7a4f9fe",
    "consumer-insights-tool": "https://images.unsplash.com/photo-1551288049-bebda4e38f71",
}

TOOL_IMAGE_BANNER_PARAMS = (
    "w=600&h=400&fit=crop&q=80&blend=0a0a0aCC&blend-mode=multiply&sat=-100&con=20"
)
TOOL_IMAGE_SQUARE_PARAMS = "w=400&h=400&fit=crop&q=80"

# --- Chat prompt enhancement ---

ENHANCEMENT_SYSTEM_PROMPT = """\
You are an expert AI image prompt engineer specializing in consumer packaged goods photography.
Your job is to take a basic product image prompt and rewrite it into a detailed,
photorealistic prompt for a concept product render.

Rules:
- Keep the brand, product category and innovation intact
- Add specific photography terms (lens type, lighting setup, depth of field)
- Describe packaging material, shape and finish
- Keep the prompt under 120 words
- Do NOT add any explanation, output ONLY the enhanced prompt text
- Never ask for text or logos other than the brand name
"""
