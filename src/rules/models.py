from pydantic import BaseModel, ConfigDict, Field


class LengthRule(BaseModel):
    min_length: int = Field(ge=0)
    message: str


class ContactFormRules(BaseModel):
    first_name: LengthRule = LengthRule(
        min_length=2, message="First name must be at least 2 characters."
    )
    last_name: LengthRule = LengthRule(
        min_length=2, message="Last name must be at least 2 characters."
    )
    company: LengthRule = LengthRule(
        min_length=2, message="Company name must be at least 2 characters."
    )
    subject: LengthRule = LengthRule(min_length=1, message="Please select a subject.")
    message: LengthRule = LengthRule(
        min_length=10, message="Message must be at least 10 characters."
    )
    email_message: str = "Please enter a valid email address."
    privacy_policy_message: str = "You must agree to the privacy policy."


class NewsletterFormRules(BaseModel):
    email_message: str = "Invalid email address"


class FormsRules(BaseModel):
    contact: ContactFormRules = ContactFormRules()
    newsletter: NewsletterFormRules = NewsletterFormRules()


class HttpRules(BaseModel):
    api_prefix: str = "/api"
    log_line_max_chars: int = Field(default=80, ge=10)


class ResourceCategory(BaseModel):
    id: str
    name: str
    count: int = Field(ge=0)


class ResourcesRules(BaseModel):
    categories: list[ResourceCategory] = [
        ResourceCategory(id="blog", name="Blog", count=27),
        ResourceCategory(id="case-studies", name="Case Studies", count=12),
        ResourceCategory(id="whitepapers", name="Whitepapers", count=8),
        ResourceCategory(id="guides", name="Guides", count=15),
    ]


class ProjectRules(BaseModel):
    slug: str
    rules_version: str


class Rules(BaseModel):
    project: ProjectRules
    forms: FormsRules = FormsRules()
    http: HttpRules = HttpRules()
    resources: ResourcesRules = ResourcesRules()

    model_config = ConfigDict(extra="forbid")
