from typing import Literal

from pydantic import BaseModel, Field, model_validator

Capability = Literal[
    "view",
    "edit",
    "delete",
    "publish",
    "approve_review",
    "submit_for_review",
    "archive",
    "manage_team",
    "change_settings",
]

# Highest role first; each role must hold every capability of the roles below it.
ROLE_ORDER: tuple[str, ...] = ("admin", "editor", "viewer")


class ProjectRules(BaseModel):
    slug: str
    rules_version: str


class WorkflowRules(BaseModel):
    roles: dict[str, list[Capability]]

    @model_validator(mode="after")
    def check_lattice(self) -> "WorkflowRules":
        unknown = set(self.roles) - set(ROLE_ORDER)
        if unknown:
            raise ValueError(f"Unknown roles in workflow.roles: {sorted(unknown)}")

        for higher, lower in zip(ROLE_ORDER, ROLE_ORDER[1:]):
            missing = set(self.roles.get(lower, [])) - set(self.roles.get(higher, []))
            if missing:
                raise ValueError(
                    f"Role '{higher}' must include every capability of '{lower}'; "
                    f"missing {sorted(missing)}"
                )
        return self


class PublishingRules(BaseModel):
    seo_title_min: int = Field(default=10, ge=1)
    seo_description_min: int = Field(default=50, ge=1)
    seo_description_max: int = Field(default=160, ge=1)
    geo_snippet_min: int = Field(default=50, ge=1)
    geo_key_points_min: int = Field(default=3, ge=1)
    geo_key_points_max: int = Field(default=5, ge=1)


class BatchRules(BaseModel):
    max_workers: int = Field(default=1, ge=1, le=32)


class AuditRules(BaseModel):
    db_filename: str = "audit.db"


class OpsRules(BaseModel):
    required_env: list[str] = Field(default_factory=list)


class Rules(BaseModel):
    project: ProjectRules
    workflow: WorkflowRules
    publishing: PublishingRules = Field(default_factory=PublishingRules)
    batch: BatchRules = Field(default_factory=BatchRules)
    audit: AuditRules = Field(default_factory=AuditRules)
    ops: OpsRules = Field(default_factory=OpsRules)
