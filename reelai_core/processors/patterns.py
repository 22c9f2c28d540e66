"""Prompt templates for pattern extraction, one per content pattern."""

from types import MappingProxyType

from reelai_core.models.video import ContentPattern

SYSTEM_PROMPT = (
    "You are a strict JSON parser that extracts structured data from video "
    "transcripts. Follow the requested schema exactly, output a single JSON "
    "object and nothing else, and never add information that is not stated "
    "in the transcript."
)

_RULES = """Rules:
- Use ONLY information explicitly stated in the transcript. Never invent, estimate or fill in plausible values.
- If an optional field has no evidence in the transcript, omit it entirely.
- If the transcript does not describe a {name}, return exactly: {{"error": "Not a valid {name}"}}
"""

WORKOUT_PROMPT = """Extract the workout described in this video transcript.

Return a JSON object with this structure:
{
  "type": "workout",
  "exercises": [
    {
      "name": "Exercise name",          // required
      "sets": 3,                        // optional, integer
      "reps": 10,                       // optional, integer or string such as "8-12"
      "weight": "20 kg",                // optional, include the unit as spoken
      "duration": "30 seconds",         // optional, for timed exercises
      "intensity": "moderate",          // optional
      "rest_duration": "60 seconds"     // optional, rest after the exercise
    }
  ]
}

Required: "type" and at least one exercise with a "name".
List exercises in the order they are performed.
""" + _RULES.format(name="workout")

RECIPE_PROMPT = """Extract the recipe described in this video transcript.

Return a JSON object with this structure:
{
  "type": "recipe",
  "name": "Dish name",                  // required
  "prepTime": "10 minutes",             // optional
  "cookTime": "20 minutes",             // optional
  "servings": 4,                        // optional, integer
  "ingredients": [                      // required, at least one
    {"item": "flour", "amount": 2, "unit": "cups"}
  ],
  "steps": ["First step", "Second step"]  // required, in order
}

For an ingredient without a stated amount or unit, omit that key rather than guessing.
""" + _RULES.format(name="recipe")

TUTORIAL_PROMPT = """Extract the tutorial described in this video transcript.

Return a JSON object with this structure:
{
  "type": "tutorial",
  "subject": "What the tutorial teaches",   // required
  "steps": [                                // required, in order
    {
      "title": "Short step title",          // required
      "description": "What to do",          // required
      "duration": "2 minutes"               // optional
    }
  ]
}
""" + _RULES.format(name="tutorial")

PATTERN_PROMPTS = MappingProxyType({
    ContentPattern.WORKOUT: WORKOUT_PROMPT,
    ContentPattern.RECIPE: RECIPE_PROMPT,
    ContentPattern.TUTORIAL: TUTORIAL_PROMPT,
})


def build_prompt(pattern: ContentPattern, transcript: str) -> str:
    """Concatenate a pattern's instructions with the raw transcript."""
    return f"{PATTERN_PROMPTS[pattern]}\nTranscript:\n{transcript}"
