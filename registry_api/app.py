"""Registry API — JSON security endpoints over a local skills mirror.

Reads skills from SKILLS_DIR (<owner>/<slug>/SKILL.md ...) on every
request and returns freshly computed security reports.
"""

import os

from flask import Flask, jsonify, current_app

from skillscanner.core.batch import batch_scan
from skillscanner.core.engine import scan_skill
from skillscanner.parsers.skill import SkillDirectory, load_skills


def create_app(skills_dir=None):
    app = Flask(__name__)
    app.json.sort_keys = False  # details/findings order is meaningful
    app.config["SKILLS_DIR"] = (skills_dir or os.environ.get("SKILLS_DIR")
                                or os.path.join(os.getcwd(), "skills"))

    # ══════════════════════════════════════════════════════════════
    #  Single skill
    # ══════════════════════════════════════════════════════════════

    @app.route("/api/skills/<owner>/<slug>/security")
    def skill_security(owner, slug):
        skill_dir = os.path.join(current_app.config["SKILLS_DIR"], owner, slug)
        if not os.path.isfile(os.path.join(skill_dir, "SKILL.md")):
            return jsonify(success=False, error="Skill not found"), 404
        try:
            skill = SkillDirectory(skill_dir, owner=owner).parse()
            report = scan_skill(skill)
        except Exception as e:
            current_app.logger.error("Error scanning skill %s/%s: %s", owner, slug, e)
            return jsonify(success=False, error=str(e)), 500
        return jsonify(success=True, **report.to_dict())

    # ══════════════════════════════════════════════════════════════
    #  Whole mirror
    # ══════════════════════════════════════════════════════════════

    @app.route("/api/security")
    def all_security():
        try:
            skills = load_skills(current_app.config["SKILLS_DIR"])
        except Exception as e:
            current_app.logger.error("Error loading skills: %s", e)
            return jsonify(success=False, error=str(e)), 500
        reports = batch_scan(skills)
        return jsonify(success=True,
                       reports={sid: r.to_dict() for sid, r in reports.items()})

    return app


if __name__ == "__main__":
    app = create_app()
    print(f"\n  Registry API on http://127.0.0.1:5000 (skills: {app.config['SKILLS_DIR']})\n")
    app.run(host="127.0.0.1", port=5000)
