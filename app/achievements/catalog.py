"""Fixed achievement catalog seeded into an empty database."""

REGISTRATION_ACHIEVEMENT = "With Registration!"

ACHIEVEMENT_CATALOG: list[dict[str, str]] = [
    {
        "name": "Team Introduction",
        "description": "Visited the 'About Us' section",
        "icon_path": "team-icon",
        "category": "about",
    },
    {
        "name": "First News",
        "description": "Scrolled to the first news article",
        "icon_path": "news-icon",
        "category": "news",
    },
    {
        "name": "Game Observer",
        "description": "Visited games section",
        "icon_path": "games-icon",
        "category": "games",
    },
    {
        "name": "GameR",
        "description": "Clicked download button on all available games",
        "icon_path": "gamer-icon",
        "category": "games",
    },
    {
        "name": REGISTRATION_ACHIEVEMENT,
        "description": "Successfully registered an account",
        "icon_path": "registration-icon",
        "category": "account",
    },
    {
        "name": "Curious",
        "description": "Hovered mouse over all tiles on homepage",
        "icon_path": "curious-icon",
        "category": "main",
    },
    {
        "name": "Letter to Developer",
        "description": "Sent an email to a developer",
        "icon_path": "mail-icon",
        "category": "contact",
    },
    {
        "name": "YouTube Subscriber",
        "description": "Visited developer's YouTube channel",
        "icon_path": "youtube-icon",
        "category": "contact",
    },
]
