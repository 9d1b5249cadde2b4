from pydantic import BaseModel, Field


class TitleRules(BaseModel):
    default: str | None = None
    site_title: str | None = None
    separator: str = " | "
    max_length: int = Field(default=70, gt=0)

class DescriptionRules(BaseModel):
    default: str | None = None
    max_length: int = Field(default=160, gt=0)

class MetaRules(BaseModel):
    title: TitleRules = Field(default_factory=TitleRules)
    description: DescriptionRules = Field(default_factory=DescriptionRules)
    robots: str | None = None
    og: dict[str, str] = Field(default_factory=dict)
