# core/permissions.py

from typing import Dict, List

from models.enums import AppRole, BaseStrEnum


# ============================================
# PERMISSION CODES ("category.action")
# ============================================
class Permission(BaseStrEnum):
    # Projects
    projects_view = "projects.view"
    projects_create = "projects.create"
    projects_edit = "projects.edit"
    projects_delete = "projects.delete"
    projects_view_budget = "projects.view_budget"

    # CRM
    crm_view = "crm.view"
    crm_create = "crm.create"
    crm_edit = "crm.edit"
    crm_delete = "crm.delete"

    # Commercial (quotes, contracts)
    commercial_view = "commercial.view"
    commercial_create = "commercial.create"
    commercial_edit = "commercial.edit"
    commercial_send = "commercial.send"

    # Invoicing
    invoicing_view = "invoicing.view"
    invoicing_create = "invoicing.create"
    invoicing_edit = "invoicing.edit"

    # Documents
    documents_view = "documents.view"
    documents_create = "documents.create"
    documents_edit = "documents.edit"
    documents_delete = "documents.delete"

    # Tasks
    tasks_view = "tasks.view"
    tasks_create = "tasks.create"
    tasks_edit = "tasks.edit"
    tasks_delete = "tasks.delete"
    tasks_assign = "tasks.assign"

    # Tenders
    tenders_view = "tenders.view"
    tenders_create = "tenders.create"
    tenders_edit = "tenders.edit"
    tenders_submit = "tenders.submit"

    # Team
    team_view = "team.view"
    team_invite = "team.invite"
    team_manage_roles = "team.manage_roles"

    # Settings
    settings_view = "settings.view"
    settings_edit = "settings.edit"
    settings_manage_modules = "settings.manage_modules"
    settings_manage_billing = "settings.manage_billing"


ALL_PERMISSIONS = frozenset(Permission.list())


def permission_category(code: str) -> str:
    return code.split(".", 1)[0]


PERMISSION_CATEGORIES: Dict[str, List[str]] = {}
for _code in Permission.list():
    PERMISSION_CATEGORIES.setdefault(permission_category(_code), []).append(_code)


_ALL_ROLES = [AppRole.owner, AppRole.admin, AppRole.member, AppRole.viewer]
_MEMBER_UP = [AppRole.owner, AppRole.admin, AppRole.member]
_ADMIN_UP = [AppRole.owner, AppRole.admin]
_OWNER_ONLY = [AppRole.owner]


# ============================================
# DEFAULT PERMISSION → ROLES MATRIX
# ============================================
PERMISSION_MATRIX: Dict[str, List[AppRole]] = {

    # =====================================================
    # PROJECTS
    # =====================================================
    "projects.view": _ALL_ROLES,
    "projects.create": _MEMBER_UP,
    "projects.edit": _MEMBER_UP,
    "projects.delete": _ADMIN_UP,
    "projects.view_budget": _ADMIN_UP,

    # =====================================================
    # CRM
    # =====================================================
    "crm.view": _ALL_ROLES,
    "crm.create": _MEMBER_UP,
    "crm.edit": _MEMBER_UP,
    "crm.delete": _ADMIN_UP,

    # =====================================================
    # COMMERCIAL (members draft, admins send)
    # =====================================================
    "commercial.view": _MEMBER_UP,
    "commercial.create": _MEMBER_UP,
    "commercial.edit": _MEMBER_UP,
    "commercial.send": _ADMIN_UP,

    # =====================================================
    # INVOICING
    # =====================================================
    "invoicing.view": _ADMIN_UP,
    "invoicing.create": _ADMIN_UP,
    "invoicing.edit": _ADMIN_UP,

    # =====================================================
    # DOCUMENTS
    # =====================================================
    "documents.view": _ALL_ROLES,
    "documents.create": _MEMBER_UP,
    "documents.edit": _MEMBER_UP,
    "documents.delete": _ADMIN_UP,

    # =====================================================
    # TASKS
    # =====================================================
    "tasks.view": _ALL_ROLES,
    "tasks.create": _MEMBER_UP,
    "tasks.edit": _MEMBER_UP,
    "tasks.delete": _ADMIN_UP,
    "tasks.assign": _MEMBER_UP,

    # =====================================================
    # TENDERS
    # =====================================================
    "tenders.view": _ALL_ROLES,
    "tenders.create": _MEMBER_UP,
    "tenders.edit": _MEMBER_UP,
    "tenders.submit": _ADMIN_UP,

    # =====================================================
    # TEAM
    # =====================================================
    "team.view": _ALL_ROLES,
    "team.invite": _ADMIN_UP,
    "team.manage_roles": _ADMIN_UP,

    # =====================================================
    # SETTINGS (billing stays with the owner)
    # =====================================================
    "settings.view": _ADMIN_UP,
    "settings.edit": _ADMIN_UP,
    "settings.manage_modules": _ADMIN_UP,
    "settings.manage_billing": _OWNER_ONLY,
}


def default_permissions_for_role(role: AppRole) -> frozenset:
    """Permissions a role holds before any workspace override."""
    return frozenset(code for code, roles in PERMISSION_MATRIX.items() if role in roles)
