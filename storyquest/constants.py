# Campaign statuses and story post authors
CAMPAIGN_STATUSES = ("active", "completed", "paused")
AUTHOR_TYPES = ("system", "player")
USER_ROLES = ("player", "admin")
ITEM_TYPES = ("weapon", "armor", "potion", "artifact", "misc")

# Character sheet
STAT_NAMES = ("strength", "dexterity", "constitution", "intelligence", "wisdom", "charisma")
DEFAULT_STAT_VALUE = 10
DEFAULT_STATS = {name: DEFAULT_STAT_VALUE for name in STAT_NAMES}

# Fixed campaign openings, used when the narrator cannot be reached
THEME_INTROS = {
    "medieval-fantasy": (
        "Welcome to a world of knights, wizards, and ancient magic. "
        "Your adventure begins in a small village on the edge of a vast kingdom."
    ),
    "sci-fi": (
        "In the distant future, humanity has spread across the stars. "
        "Your journey starts aboard a space station orbiting a distant planet."
    ),
    "post-apocalyptic": (
        "The world as we knew it is gone. "
        "Decades after the great collapse, survivors struggle to rebuild civilization."
    ),
    "cyberpunk": (
        "Neon lights illuminate the rain-slicked streets of the megacity. "
        "Corporations rule from their towering skyscrapers while hackers and street samurai navigate the shadows."
    ),
    "steampunk": (
        "Gears turn and steam hisses in a world of brass and innovation. "
        "The industrial revolution has taken a fantastical turn."
    ),
    "horror": (
        "A sense of dread hangs in the air. "
        "Something lurks beyond the veil of normalcy, waiting to be discovered."
    ),
}
DEFAULT_INTRO = "Your adventure begins. What will you do?"

# World blurbs fed to the narrator alongside the campaign description
THEME_CONTEXTS = {
    "medieval-fantasy": "A world of knights, wizards, dragons and ancient magic.",
    "sci-fi": "A futuristic universe with advanced technology, space travel, and alien civilizations.",
    "post-apocalyptic": "A devastated world recovering from a catastrophic event that nearly ended civilization.",
    "cyberpunk": "A dystopian future where advanced technology coexists with social disorder and corporate control.",
    "steampunk": (
        "An alternate history where steam power remains the dominant form of technology, "
        "mixed with fantastical elements."
    ),
    "horror": (
        "A dark and terrifying setting where supernatural forces threaten the characters' survival and sanity."
    ),
}
DEFAULT_THEME_CONTEXT = "A world of adventure and mystery."

# Narrator prompts
DM_PROMPT_HEADER = "You are the Dungeon Master for a D&D-inspired RPG game called StoryQuest."

DM_GUIDELINES = (
    "As the Dungeon Master, provide a creative, engaging, and appropriate response to the player's input.\n"
    "Consider the campaign setting, character abilities, and recent story context.\n"
    "If the player attempts an action, determine success based on their character's abilities and stats.\n"
    "Incorporate items from the character's inventory into the story when appropriate.\n"
    "Keep your response immersive, descriptive, and in the style of a skilled D&D Dungeon Master.\n"
    "End with a situation the player can respond to.\n"
    "Limit your response to 300-500 words."
)

EMPTY_STORY_CONTEXT = "This is the beginning of the adventure."

CAMPAIGN_INTRO_PROMPT = (
    "You are a skilled Dungeon Master narrating a new adventure.\n"
    "Craft an engaging introduction for a campaign in the following theme: {theme}.\n"
    "Campaign: {name}\n"
    "Campaign Description: {description}\n"
    "Include details about the setting, atmosphere, and a hook to draw the player in.\n"
    "Keep it under 500 words. Use rich, descriptive language to set the scene."
)

ITEM_INTRODUCTION_PROMPT = (
    "You are a Dungeon Master introducing a new item in a {theme} campaign.\n"
    "Create a description for an item that would fit this setting and be interesting for {character_name}, "
    "a {race} {character_class}.\n"
    "Start with the item's name alone on the first line.\n"
    "Include the item's physical description, and hint at any powers or significance it might have.\n"
    "Keep it under 150 words."
)

DEFAULT_ITEM_NAME = "Mysterious Item"
