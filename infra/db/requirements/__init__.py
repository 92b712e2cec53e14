from infra.db.requirements.query import DEFAULT_SOFTWARE_HOURS, SqlAlchemyTrainingRequirementQuery

__all__ = ["DEFAULT_SOFTWARE_HOURS", "SqlAlchemyTrainingRequirementQuery"]
