# wod_planner/routines/render.py
import json
from typing import Dict, List


def _format_constraint_list(values: List[str]) -> str:
    return "[" + ", ".join(f"'{value}'" for value in values) + "]"


def render_text(plan: Dict) -> str:
    """Format the plan as the plain-text session sheet."""
    lines = []
    profile = plan['profile']
    limitations = profile['limitations']

    lines.append("WOD Plan")
    lines.append(f"Seed: {plan['seed']}")
    lines.append(
        f"Profile: goal={profile['goal']}, level={profile['fitness_level']}, "
        f"duration={profile['session_minutes']} min, intensity={profile['intensity']}"
    )
    if limitations['avoid_patterns'] or limitations['avoid_movements']:
        lines.append(
            f"Constraints: avoid_patterns={_format_constraint_list(limitations['avoid_patterns'])} "
            f"avoid_movements={_format_constraint_list(limitations['avoid_movements'])}"
        )

    if plan['context']['recent_fatigue_patterns']:
        lines.append(f"Recent pattern load: {', '.join(plan['context']['recent_fatigue_patterns'])}")

    lines.append("")
    lines.append(f"Warm-up ({plan['warmup']['duration_min']} min)")
    for item in plan['warmup']['items']:
        lines.append(f"- {item}")

    strength = plan['strength_or_skill']
    if strength:
        label = "Skill / Strength" if strength['focus'] == 'skill' else "Strength"
        lines.append("")
        lines.append(f"{label} ({strength['duration_min']} min)")
        lines.append(f"- {strength['prescription']}")

    metcon = plan['metcon']
    lines.append("")
    lines.append(f"Metcon ({metcon['duration_min']} min, {metcon['type']})")
    lines.append(f"- {metcon['description']}")

    lines.append("")
    lines.append(f"Cooldown ({plan['cooldown']['duration_min']} min)")
    for item in plan['cooldown']['items']:
        lines.append(f"- {item}")

    lines.append("")
    lines.append("Scaling options")
    for note in plan['scaling']:
        lines.append(f"- {note['movement']}: easier={note['easier']} | harder={note['harder']}")

    return "\n".join(lines)


def plan_to_json(plan: Dict) -> str:
    return json.dumps(plan, indent=2)


def plan_from_json(text: str) -> Dict:
    return json.loads(text)
