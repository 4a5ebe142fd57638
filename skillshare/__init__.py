"""SkillShare learning-plan backend."""
