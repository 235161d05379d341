from datetime import datetime

from pydantic import BaseModel, EmailStr, Field

# --- Формы

class SignInReq(BaseModel):
    email: EmailStr
    password: str

class SignUpReq(BaseModel):
    email: EmailStr
    password: str = Field(min_length=6)
    full_name: str = Field(min_length=1)

# --- Части представлений

class NoticeOut(BaseModel):
    level: str
    message: str

class ProfileSummaryOut(BaseModel):
    display_name: str
    email: str
    initials: str | None = None
    avatar_icon: str | None = None
    member_since: str | None = None

class CourseCardOut(BaseModel):
    id: str
    name: str
    slug: str
    description: str
    icon: str
    gradient: str
    href: str

class ResourceCardOut(BaseModel):
    title: str
    url: str
    description: str
    target: str
    rel: str

class EnrollmentCardOut(BaseModel):
    id: str
    enrolled_at: datetime
    enrolled_on: str
    course: CourseCardOut

class CallToActionOut(BaseModel):
    message: str
    label: str
    href: str

class FormField(BaseModel):
    name: str
    label: str
    type: str
    placeholder: str
    min_length: int | None = None

class FormState(BaseModel):
    email: str = ""
    full_name: str = ""
    busy: bool = False

# --- Представления

class CredentialView(BaseModel):
    mode: str
    title: str
    description: str
    fields: list[FormField]
    submit_label: str
    action: str
    toggle_label: str
    toggle_href: str
    form: FormState = FormState()
    notice: NoticeOut | None = None

class CatalogView(BaseModel):
    profile: ProfileSummaryOut
    heading: str = "Explore Our Courses"
    subheading: str = "Choose from our comprehensive programming courses and start learning today"
    courses: list[CourseCardOut]
    dashboard_href: str = "/dashboard"
    sign_out_action: str = "/auth/sign-out"
    notice: NoticeOut | None = None

class CourseView(BaseModel):
    course: CourseCardOut
    heading: str
    description: str
    resources: list[ResourceCardOut]
    enroll_href: str
    dashboard_href: str
    back_href: str = "/home"
    notice: NoticeOut | None = None

class DashboardView(BaseModel):
    profile: ProfileSummaryOut
    heading: str
    enrollments: list[EnrollmentCardOut]
    empty_state: CallToActionOut | None = None
    back_href: str = "/home"
    notice: NoticeOut | None = None

class EnrollResp(BaseModel):
    result: str
    notice: NoticeOut
