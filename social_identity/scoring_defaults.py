"""
Social Identity Engine — Reference scoring configuration

Seven trait dimensions
----------------------
  ER  Emotional Regulation       composure in social uncertainty
  CR  Cognitive Reflection       depth of processing before acting
  SI  Social Initiative          likelihood of initiating contact
  PF  Psychological Flexibility  comfort outside the usual circle
  GP  Goal Persistence           commitment to building relationships
  SE  Self-Insight               awareness of own social patterns
  ED  Exploratory Drive          desire for new social experiences

Mood-check (PANAS) items carry roughly half the weight of the behavioural
items: they modulate the profile rather than define it.  Weights stay within
0.25-1.2 so no single item dominates a trait.

This module is plain data.  It is validated into a ``ScoringConfig`` by
``social_identity.config.get_scoring_config``.
"""

from __future__ import annotations

from typing import Any

TRAITS: tuple[str, ...] = ("ER", "CR", "SI", "PF", "GP", "SE", "ED")

TRAIT_META: dict[str, dict[str, str]] = {
    "ER": {"label": "Emotional Regulation", "description": "Composure in social uncertainty"},
    "CR": {"label": "Cognitive Reflection", "description": "Depth of processing before acting"},
    "SI": {"label": "Social Initiative", "description": "Likelihood of starting connections"},
    "PF": {"label": "Psychological Flexibility", "description": "Comfort outside your usual circle"},
    "GP": {"label": "Goal Persistence", "description": "Commitment to meaningful relationships"},
    "SE": {"label": "Self-Insight", "description": "Awareness of your own social patterns"},
    "ED": {"label": "Exploratory Drive", "description": "Desire for new social experiences"},
}

ORDINAL_MAPS: dict[str, dict[str, int]] = {
    "social_frequency": {
        "Never": 1, "Rarely": 2, "Sometimes": 3, "Often": 4, "Very Often": 5,
    },
    "friendship_ease": {
        "Very Difficult": 1, "Difficult": 2, "Neutral": 3, "Easy": 4, "Very Easy": 5,
    },
    "conversation_initiator": {
        "They usually start": 1,
        "It happens naturally": 3,
        "Depends on situation": 3,
        "I usually start": 5,
    },
    "first_interaction_comfort": {
        "Very Uncomfortable": 1, "Uncomfortable": 2, "Neutral": 3,
        "Comfortable": 4, "Very Comfortable": 5,
    },
}

# ──────────────────────────────────────────────────────────────────────────────
# Item weights.  ``reverse`` means a high raw answer lowers the trait;
# ``reverse_exempt`` lists traits that still score forward on a reversed item.
# ──────────────────────────────────────────────────────────────────────────────

ITEMS: dict[str, dict[str, Any]] = {
    # ── PANAS mood check ──────────────────────────────────────────────────
    "panas_1": {"weights": {"ED": 0.5}},                                   # Interested
    "panas_2": {"weights": {"ER": 0.5}, "reverse": True},                  # Distressed
    "panas_3": {"weights": {"ED": 0.4, "SI": 0.25}},                       # Excited
    "panas_4": {"weights": {"ER": 0.5}, "reverse": True},                  # Upset
    "panas_5": {"weights": {"GP": 0.4}},                                   # Strong
    "panas_6": {"weights": {"SE": 0.25}, "reverse": True},                 # Guilty
    "panas_7": {"weights": {"ER": 0.5, "PF": 0.25}, "reverse": True},      # Scared
    "panas_8": {"weights": {"PF": 0.4}, "reverse": True},                  # Hostile
    "panas_9": {"weights": {"SI": 0.4, "ED": 0.4}},                        # Enthusiastic
    "panas_10": {"weights": {"SE": 0.5}},                                  # Proud
    "panas_11": {"weights": {"ER": 0.4}, "reverse": True},                 # Irritable
    "panas_12": {"weights": {"CR": 0.5}},                                  # Alert
    "panas_13": {"weights": {"SE": 0.5}, "reverse": True},                 # Ashamed
    "panas_14": {"weights": {"ED": 0.4, "GP": 0.25}},                      # Inspired
    "panas_15": {"weights": {"ER": 0.5, "SI": 0.25}, "reverse": True},     # Nervous
    "panas_16": {"weights": {"GP": 0.5}},                                  # Determined
    "panas_17": {"weights": {"CR": 0.5}},                                  # Attentive
    "panas_18": {"weights": {"ER": 0.4}, "reverse": True},                 # Jittery
    "panas_19": {"weights": {"SI": 0.5}},                                  # Active
    "panas_20": {"weights": {"ER": 0.5, "PF": 0.25}, "reverse": True},     # Afraid

    # ── Social experience ─────────────────────────────────────────────────
    "social_satisfaction": {"weights": {"SE": 1.0, "GP": 0.5}},
    "belonging": {"weights": {"SE": 1.0, "PF": 0.8}},
    "close_friends": {"weights": {"GP": 1.2}},
    "social_isolation": {"weights": {"SI": 1.0, "SE": 0.8}, "reverse": True},

    # ── Social behaviour (ordinal) ────────────────────────────────────────
    "social_frequency": {"weights": {"SI": 1.2}},
    "friendship_ease": {"weights": {"PF": 1.0, "SI": 0.5}},

    # ── Initiation anxiety ────────────────────────────────────────────────
    "initiation_anxiety": {"weights": {"ER": 1.2, "SI": 1.0}, "reverse": True},
    # Overthinking drains composure but reflects deeper processing.
    "overthinking": {
        "weights": {"ER": 0.8, "CR": 0.5},
        "reverse": True,
        "reverse_exempt": ["CR"],
    },
    "avoidance": {"weights": {"SI": 1.2, "GP": 0.5}, "reverse": True},
    "judgment_concern": {"weights": {"ER": 1.2, "PF": 0.8}, "reverse": True},

    # ── Initiation behaviour & comfort (ordinal) ──────────────────────────
    "conversation_initiator": {"weights": {"SI": 1.0}},
    "first_interaction_comfort": {"weights": {"ER": 1.0, "PF": 0.8}},

    # ── Context & opportunity ─────────────────────────────────────────────
    "social_expansion_desire": {"weights": {"ED": 1.2, "GP": 0.8}},
    # Online comfort lowers in-person flexibility, lifts reflection.
    "online_comfort": {
        "weights": {"PF": 0.6, "CR": 0.5},
        "reverse": True,
        "reverse_exempt": ["CR"],
    },
    "structured_preference": {"weights": {"CR": 0.8, "ER": 0.5}},
    "spontaneous_value": {"weights": {"ED": 1.0, "SI": 0.5}},
}

# ──────────────────────────────────────────────────────────────────────────────
# Archetypes
# ──────────────────────────────────────────────────────────────────────────────

DEFAULT_ARCHETYPE = "balanced_navigator"

ARCHETYPES: dict[str, dict[str, Any]] = {
    "inner_architect": {
        "title": "The Inner Architect",
        "tagline": "You think before you move — and that's your strength.",
        "icon": "\U0001F3DB",
        "accent": "linear-gradient(135deg, #667eea 0%, #764ba2 100%)",
        "tone": "reflective",
        "typical_pair": ["CR", "ER"],
    },
    "catalyst": {
        "title": "The Catalyst",
        "tagline": "Energy finds you — and others follow.",
        "icon": "⚡",
        "accent": "linear-gradient(135deg, #f093fb 0%, #f5576c 100%)",
        "tone": "energetic",
        "typical_pair": ["SI", "ED"],
    },
    "steady_anchor": {
        "title": "The Steady Anchor",
        "tagline": "Where others drift, you hold ground.",
        "icon": "⚓",
        "accent": "linear-gradient(135deg, #11998e 0%, #38ef7d 100%)",
        "tone": "grounded",
        "typical_pair": ["ER", "GP"],
    },
    "reflective_observer": {
        "title": "The Reflective Observer",
        "tagline": "You notice what others miss.",
        "icon": "\U0001F52D",
        "accent": "linear-gradient(135deg, #4776e6 0%, #8e54e9 100%)",
        "tone": "introspective",
        "typical_pair": ["CR", "SE"],
    },
    "quiet_explorer": {
        "title": "The Quiet Explorer",
        "tagline": "Curiosity pulls you forward, quietly.",
        "icon": "\U0001F331",
        "accent": "linear-gradient(135deg, #56ab2f 0%, #a8e063 100%)",
        "tone": "curious",
        "typical_pair": ["ED", "CR"],
    },
    "bridge_builder": {
        "title": "The Bridge Builder",
        "tagline": "You connect worlds others keep apart.",
        "icon": "\U0001F309",
        "accent": "linear-gradient(135deg, #f7971e 0%, #ffd200 100%)",
        "tone": "warm",
        "typical_pair": ["PF", "SI"],
    },
    "intentional_connector": {
        "title": "The Intentional Connector",
        "tagline": "Every friendship you build is built to last.",
        "icon": "\U0001F91D",
        "accent": "linear-gradient(135deg, #ee0979 0%, #ff6a00 100%)",
        "tone": "purposeful",
        "typical_pair": ["GP", "SE"],
    },
    "reserved_strategist": {
        "title": "The Reserved Strategist",
        "tagline": "You choose your moments — and make them count.",
        "icon": "♟",
        "accent": "linear-gradient(135deg, #2c3e50 0%, #4ca1af 100%)",
        "tone": "strategic",
        "typical_pair": ["CR", "ER"],
    },
    "expansive_initiator": {
        "title": "The Expansive Initiator",
        "tagline": "The room shifts when you decide to show up.",
        "icon": "\U0001F680",
        "accent": "linear-gradient(135deg, #fc4a1a 0%, #f7b733 100%)",
        "tone": "bold",
        "typical_pair": ["SI", "PF"],
    },
    "balanced_navigator": {
        "title": "The Balanced Navigator",
        "tagline": "You read the room and move with it.",
        "icon": "\U0001F9ED",
        "accent": "linear-gradient(135deg, #8e9eab 0%, #eef2f3 100%)",
        "tone": "adaptive",
        "typical_pair": [],
    },
}

# Ordered (primary-secondary) pairs; both orderings are listed explicitly.
PAIR_TABLE: dict[str, str] = {
    "CR-ER": "inner_architect",
    "ER-CR": "inner_architect",
    "SI-ED": "catalyst",
    "ED-SI": "catalyst",
    "ER-GP": "steady_anchor",
    "GP-ER": "steady_anchor",
    "CR-SE": "reflective_observer",
    "SE-CR": "reflective_observer",
    "ED-CR": "quiet_explorer",
    "CR-ED": "quiet_explorer",
    "PF-SI": "bridge_builder",
    "SI-PF": "bridge_builder",
    "GP-SE": "intentional_connector",
    "SE-GP": "intentional_connector",
    "CR-PF": "reserved_strategist",
    "PF-CR": "reserved_strategist",
    "SI-ER": "expansive_initiator",
    "ER-SI": "expansive_initiator",
    "ED-PF": "expansive_initiator",
    "PF-ED": "expansive_initiator",
    "GP-ED": "catalyst",
    "ED-GP": "catalyst",
    "SE-ER": "reflective_observer",
    "ER-SE": "reflective_observer",
    "GP-SI": "bridge_builder",
    "SI-GP": "bridge_builder",
}

# ──────────────────────────────────────────────────────────────────────────────
# Insight templates
# ──────────────────────────────────────────────────────────────────────────────

INSIGHTS: dict[str, Any] = {
    "high": {
        "ER": "Social uncertainty rarely rattles you — you process pressure quietly and move through it.",
        "CR": "You tend to think before you speak, which makes your words land with more precision.",
        "SI": "You have a natural pull toward connection — conversations often start because of you.",
        "PF": "You drift comfortably between different groups and contexts without losing yourself.",
        "GP": "When you decide someone matters to you, you show up consistently — and that's rare.",
        "SE": "You have an unusually clear window into your own emotions and social tendencies.",
        "ED": "New social territory feels like invitation, not threat — you actively seek it out.",
    },
    "low": {
        "ER": "Social tension can knock you off balance — but that sensitivity also makes you perceptive.",
        "CR": "You lead with instinct over analysis. Sometimes that energy is exactly what a moment needs.",
        "SI": "You may wait for the right moment rather than create it — patience is also a strategy.",
        "PF": "You thrive in familiar environments and relationships. Depth over breadth.",
        "GP": "Long-term relationship investment doesn't come naturally right now — that can shift.",
        "SE": "Mapping your own patterns in social situations is still a developing skill for you.",
        "ED": "New social experiences feel more uncertain than exciting right now.",
    },
    "primary_high_threshold": 60,
    "secondary_high_threshold": 55,
    "initiative_trait": "SI",
    "initiative_high_threshold": 65,
    "initiative_high": (
        "{title}s tend to initiate often. Your Social Initiative score of {score} "
        "puts you above the typical range for your type."
    ),
    "initiative_typical": (
        "{title}s often score moderately on Social Initiative. At {score}, "
        "you sit right in the heart of your type."
    ),
    "regulation_trait": "ER",
    "regulation_high_threshold": 60,
    "regulation_high": (
        "Emotional Regulation often separates archetypes in social performance. "
        "Your score of {score} sits above the midpoint — a quiet advantage."
    ),
    "regulation_low": (
        "Emotional Regulation often separates archetypes in social performance. "
        "Your score of {score} shows room for building resilience under social pressure."
    ),
}

AFFECT: dict[str, list[str]] = {
    "positive_items": [f"panas_{i}" for i in (1, 3, 5, 9, 10, 12, 14, 16, 17, 19)],
    "negative_items": [f"panas_{i}" for i in (2, 4, 6, 7, 8, 11, 13, 15, 18, 20)],
}

DEFAULT_SCORING_CONFIG: dict[str, Any] = {
    "version": "campus-social-identity-v3",
    "traits": list(TRAITS),
    "trait_meta": TRAIT_META,
    "ordinal_maps": ORDINAL_MAPS,
    "items": ITEMS,
    "archetypes": ARCHETYPES,
    "default_archetype": DEFAULT_ARCHETYPE,
    "pair_table": PAIR_TABLE,
    "insights": INSIGHTS,
    "affect": AFFECT,
}
