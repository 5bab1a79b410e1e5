from os import path
from typing import Dict, Iterable, List, Optional, Tuple
import json
import os
import re

import yaml

from skillscanner.core.models import Skill

_FRONTMATTER = re.compile(r"^---\n(.*?)\n---", re.S)


class SkillDirectory:
    def __init__(self, skillPath: str, owner: Optional[str] = None) -> None:
        """
        <root>/<owner>/<slug>/
            SKILL.md        (optional YAML frontmatter)
            README.md       (optional)
            _meta.json      (optional)
            LICENSE*        (optional)
        """

        self.skillPath = path.abspath(skillPath)
        self.slug = path.basename(self.skillPath.rstrip(os.sep))
        self.owner = owner or path.basename(path.dirname(self.skillPath))

        self.frontmatter = {}
        self.meta = {}

    @property
    def id(self) -> str:
        return f"{self.owner}/{self.slug}"

    def parse(self) -> Skill:
        if not path.isdir(self.skillPath):
            raise FileNotFoundError(f"Skill directory not found: {self.skillPath}")

        skill_md = self._read("SKILL.md")
        readme = self._read("README.md")

        body = None
        if skill_md:
            self.frontmatter, body = split_frontmatter(
                skill_md, source=path.join(self.skillPath, "SKILL.md"))

        raw_meta = self._read("_meta.json")
        if raw_meta:
            try:
                self.meta = json.loads(raw_meta)
            except json.JSONDecodeError as e:
                raise ValueError(f"{self.id}: invalid _meta.json ({e})") from e
            if not isinstance(self.meta, dict):
                raise ValueError(f"{self.id}: _meta.json must be an object")

        env_vars, bins = declared_requirements(self.frontmatter)
        meta_env, meta_bins = declared_requirements(self.meta)

        return Skill(
            id=self.id,
            skill_md=skill_md,
            readme=readme,
            body=body or None,
            env_vars=frozenset(env_vars | meta_env),
            bins=frozenset(bins | meta_bins),
            license=self._license(),
            display_name=(self.meta.get("displayName")
                          or self.frontmatter.get("name") or self.slug),
        )

    # --------- helpers internos ---------

    def _read(self, name: str) -> Optional[str]:
        p = path.join(self.skillPath, name)
        if not path.isfile(p):
            return None
        with open(p, "r", encoding="utf-8", errors="ignore") as f:
            return f.read().replace("\r\n", "\n")

    def _license(self) -> Optional[str]:
        for src in (self.frontmatter, self.meta):
            value = src.get("license")
            if isinstance(value, str) and value.strip():
                return value.strip()
        for name in sorted(os.listdir(self.skillPath)):
            if name.upper().startswith(("LICENSE", "LICENCE")):
                return name
        return None


def split_frontmatter(text: str, source: str = "SKILL.md") -> Tuple[Dict, str]:
    """Return (frontmatter mapping, body). Without frontmatter the body is the whole text."""
    m = _FRONTMATTER.match(text)
    if not m:
        return {}, text.strip()
    try:
        data = yaml.safe_load(m.group(1)) or {}
    except yaml.YAMLError as e:
        raise ValueError(f"{source}: invalid frontmatter ({e})") from e
    if not isinstance(data, dict):
        raise ValueError(f"{source}: frontmatter must be a mapping")
    return data, text[m.end():].strip()


def _names(value) -> set:
    if isinstance(value, str):
        return {value.strip()} if value.strip() else set()
    if isinstance(value, (list, tuple)):
        return {str(v).strip() for v in value if str(v).strip()}
    return set()


def declared_requirements(manifest: Dict) -> Tuple[set, set]:
    """
    Declared env vars and binaries from `requires.{env,bins}`, either at top
    level or nested one level under `metadata.<vendor>`.
    """
    env, bins = set(), set()
    blocks = [manifest.get("requires")]
    metadata = manifest.get("metadata")
    if isinstance(metadata, dict):
        blocks += [v.get("requires") for v in metadata.values() if isinstance(v, dict)]

    for req in blocks:
        if isinstance(req, dict):
            env |= _names(req.get("env"))
            bins |= _names(req.get("bins"))
    return env, bins


def iter_skill_dirs(root: str) -> Iterable[str]:
    """owner/slug directories holding a SKILL.md, in sorted order."""
    for owner in sorted(os.listdir(root)):
        owner_dir = path.join(root, owner)
        if not path.isdir(owner_dir):
            continue
        for slug in sorted(os.listdir(owner_dir)):
            skill_dir = path.join(owner_dir, slug)
            if path.isfile(path.join(skill_dir, "SKILL.md")):
                yield skill_dir


def load_skill(skill_dir: str) -> Skill:
    return SkillDirectory(skill_dir).parse()


def load_skills(root: str) -> List[Skill]:
    if not path.isdir(root):
        raise FileNotFoundError(f"Skills root not found: {root}")
    return [load_skill(d) for d in iter_skill_dirs(root)]
