"""SkillBoard: peer-to-peer skill exchange API and client."""

__version__ = "0.1.0"
