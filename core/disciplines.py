# core/disciplines.py

"""
Discipline registry.

Static catalog of the four business disciplines a workspace can run under.
Each entry carries its terminology, the ordered tab / synthesis block / form
section definitions of the tender views, the modules it offers, default
project phases and types, CRM pipeline stages and base feature flags.

Configuration-as-code: nothing here is written at runtime. Workspace-level
customisation is layered on top by core.overrides.
"""

from typing import Dict, List, Optional, Union

from core.config import settings
from models.discipline import (
    DisciplineDefinition,
    DisciplineOption,
    DisciplinePhase,
    DisciplineProjectType,
    Terminology,
)
from models.enums import Discipline
from models.view_definition import SectionDef, SynthesisBlockDef, TabDef


# ============================================================
# ALIASES (slugs found in stored workspace / tender rows)
# ============================================================
DISCIPLINE_ALIASES: Dict[str, Discipline] = {
    "archi": Discipline.architecture,
    "interior": Discipline.interior_design,
    "interieur": Discipline.interior_design,
    "scenographie": Discipline.scenography,
    "scenographie_exposition": Discipline.scenography,
    "comm": Discipline.communication,
}

DISCIPLINE_ORDER: List[Discipline] = [
    Discipline.architecture,
    Discipline.interior_design,
    Discipline.scenography,
    Discipline.communication,
]


def normalize_discipline(value: Union[str, Discipline, None]) -> Optional[Discipline]:
    """Map a slug (or alias) to a Discipline; None when unknown."""
    if value is None:
        return None
    if isinstance(value, Discipline):
        return value
    slug = str(value).strip().lower()
    if slug in Discipline.list():
        return Discipline(slug)
    return DISCIPLINE_ALIASES.get(slug)


# Used when a workspace has no discipline or an unknown one
DEFAULT_DISCIPLINE: Discipline = normalize_discipline(settings.DEFAULT_DISCIPLINE) or Discipline.architecture


# ============================================================
# SHARED TENDER TABS
# ============================================================
def _tender_tabs(equipe: str, documents: str, memoire: str) -> List[TabDef]:
    return [
        TabDef(key="synthese", label="Synthèse", icon="LayoutDashboard", component="TenderSyntheseTab", order=1),
        TabDef(key="equipe", label=equipe, icon="Users", component="TenderEquipeTab", order=2),
        TabDef(key="calendrier", label="Calendrier", icon="Calendar", component="TenderCalendarTab", order=3),
        TabDef(key="tasks", label="Tâches", icon="CheckSquare", component="EntityTasksList", order=4),
        TabDef(key="documents", label=documents, icon="FolderOpen", component="TenderDocumentsTab", order=5),
        TabDef(key="emails", label="Emails", icon="Mail", component="EntityEmailsTab", order=6),
        TabDef(key="livrables", label="Livrables", icon="ListTodo", component="TenderLivrablesTab", order=7),
        TabDef(key="memoire", label=memoire, icon="PenTool", component="TenderMemoireTab", order=8),
    ]


# ============================================================
# ARCHITECTURE
# ============================================================
ARCHITECTURE = DisciplineDefinition(
    slug=Discipline.architecture,
    name="Architecture",
    short_name="Archi",
    description="Projets de construction, réhabilitation, extension et permis de construire",
    icon="Building2",
    color="hsl(220, 70%, 50%)",
    terminology=Terminology(
        project="Projet",
        projects="Projets",
        phase="Phase",
        phases="Phases",
        lot="Lot",
        lots="Lots",
        chantier="Chantier",
        client="Maître d'ouvrage",
        clients="Maîtres d'ouvrage",
        intervenant="Intervenant",
        intervenants="Intervenants",
        dce="DCE",
        devis="Honoraires",
        contrat="Contrat de maîtrise d'œuvre",
        budget="Budget travaux",
        surface="Surface",
    ),
    tabs=_tender_tabs("Honoraires & Équipe", "DCE", "Mémoire"),
    synthesis_blocks=[
        SynthesisBlockDef(key="budget", label="Budget travaux", icon="Euro", component="BudgetBlock", order=1),
        SynthesisBlockDef(key="honoraires", label="Honoraires MOE", icon="Briefcase", component="HonorairesBlock", order=2),
        SynthesisBlockDef(key="missions", label="Missions", icon="ListTodo", component="MissionsBlock", order=3),
        SynthesisBlockDef(key="surface", label="Surface", icon="Ruler", component="SurfaceBlock", order=4),
        SynthesisBlockDef(key="criteres", label="Critères", icon="Scale", component="CriteresBlock", order=5),
        SynthesisBlockDef(key="equipe_requise", label="Équipe requise", icon="Users", component="EquipeRequisBlock", order=6),
        SynthesisBlockDef(key="visite", label="Visite de site", icon="MapPin", component="VisiteBlock", order=7),
    ],
    form_sections=[
        SectionDef(key="general", label="Informations générales", icon="Info", order=1,
                   fields=["title", "reference", "description", "tender_type"]),
        SectionDef(key="client", label="Maître d'ouvrage", icon="Building", order=2,
                   fields=["client_name", "client_type", "client_address", "client_contact_name", "client_contact_email"]),
        SectionDef(key="projet", label="Projet", icon="Building2", order=3,
                   fields=["location", "surface_area", "project_type", "work_nature_tags"]),
        SectionDef(key="financial", label="Budget & Honoraires", icon="Euro", order=4,
                   fields=["estimated_budget", "moe_fee_percentage", "moe_fee_amount", "moe_phases"]),
        SectionDef(key="procedure", label="Procédure", icon="Scale", order=5,
                   fields=["procedure_type", "submission_type", "allows_variants", "allows_joint_venture"]),
        SectionDef(key="dates", label="Dates", icon="Calendar", order=6,
                   fields=["submission_deadline", "site_visit_date", "jury_date", "results_date"]),
    ],
    available_modules=["projects", "tasks", "crm", "documents", "tenders", "commercial", "construction",
                       "time-tracking", "resources", "calendar", "references"],
    recommended_modules=["projects", "tasks", "crm", "documents", "tenders", "commercial", "construction"],
    phases=[
        DisciplinePhase(code="ESQ", name="Esquisse", description="Études préliminaires et esquisse", percentage=10),
        DisciplinePhase(code="APS", name="Avant-Projet Sommaire", description="Études d'avant-projet sommaire", percentage=10),
        DisciplinePhase(code="APD", name="Avant-Projet Définitif", description="Études d'avant-projet définitif", percentage=15),
        DisciplinePhase(code="PRO", name="Projet", description="Études de projet", percentage=20),
        DisciplinePhase(code="DCE", name="DCE", description="Dossier de consultation des entreprises", percentage=10),
        DisciplinePhase(code="ACT", name="Passation des marchés", description="Assistance aux contrats de travaux", percentage=5),
        DisciplinePhase(code="VISA", name="Visa", description="Visa des études d'exécution", percentage=5),
        DisciplinePhase(code="DET", name="Direction travaux", description="Direction de l'exécution des travaux", percentage=20),
        DisciplinePhase(code="AOR", name="Réception", description="Assistance aux opérations de réception", percentage=5),
    ],
    project_types=[
        DisciplineProjectType(value="construction", label="Construction neuve", description="Projet de construction neuve", icon="Building2"),
        DisciplineProjectType(value="renovation", label="Rénovation", description="Réhabilitation et rénovation", icon="Hammer"),
        DisciplineProjectType(value="extension", label="Extension", description="Extension de bâtiment existant", icon="Maximize2"),
        DisciplineProjectType(value="permis", label="Permis de construire", description="Dépôt de permis uniquement", icon="FileCheck"),
        DisciplineProjectType(value="urbanisme", label="Urbanisme", description="Projet d'urbanisme", icon="Map"),
    ],
    crm_pipeline_stages=["Premier contact", "Visite", "Programme défini", "Proposition envoyée",
                         "Négociation", "Signé", "Perdu"],
    flags={
        "moe_fees": True,
        "surface_metrics": True,
        "site_visit": True,
        "construction_site": True,
        "itinerance": False,
        "media_plan": False,
    },
)


# ============================================================
# INTERIOR DESIGN
# ============================================================
INTERIOR_DESIGN = DisciplineDefinition(
    slug=Discipline.interior_design,
    name="Architecture d'intérieur",
    short_name="Intérieur",
    description="Aménagement, retail, résidentiel et hospitality",
    icon="Sofa",
    color="hsl(280, 70%, 50%)",
    terminology=Terminology(
        project="Projet",
        projects="Projets",
        phase="Phase",
        phases="Phases",
        lot="Lot",
        lots="Lots",
        chantier="Chantier",
        client="Client",
        clients="Clients",
        intervenant="Prestataire",
        intervenants="Prestataires",
        dce="Cahier des charges",
        devis="Devis",
        contrat="Contrat",
        budget="Budget d'aménagement",
        surface="Surface",
    ),
    tabs=_tender_tabs("Équipe & Honoraires", "Cahier des charges", "Note d'intention"),
    synthesis_blocks=[
        SynthesisBlockDef(key="budget", label="Budget d'aménagement", icon="Euro", component="BudgetBlock", order=1),
        SynthesisBlockDef(key="surface", label="Surface & Espaces", icon="Ruler", component="SurfaceBlock", order=2),
        SynthesisBlockDef(key="programme", label="Programme", icon="LayoutGrid", component="ProgrammeBlock", order=3),
        SynthesisBlockDef(key="criteres", label="Critères", icon="Scale", component="CriteresBlock", order=4),
        SynthesisBlockDef(key="equipe_requise", label="Équipe requise", icon="Users", component="EquipeRequisBlock", order=5),
        SynthesisBlockDef(key="visite", label="Visite", icon="MapPin", component="VisiteBlock", order=6),
    ],
    form_sections=[
        SectionDef(key="general", label="Informations générales", icon="Info", order=1,
                   fields=["title", "reference", "description"]),
        SectionDef(key="client", label="Client", icon="Building", order=2,
                   fields=["client_name", "client_type", "client_contact_name", "client_contact_email"]),
        SectionDef(key="projet", label="Projet", icon="Sofa", order=3,
                   fields=["location", "surface_area", "project_type", "style_brief"]),
        SectionDef(key="financial", label="Budget", icon="Euro", order=4,
                   fields=["estimated_budget", "fee_amount"]),
        SectionDef(key="procedure", label="Procédure", icon="Scale", visible=False, order=5,
                   fields=["procedure_type", "submission_type"]),
        SectionDef(key="dates", label="Dates", icon="Calendar", order=6,
                   fields=["submission_deadline", "site_visit_date", "results_date"]),
    ],
    available_modules=["projects", "tasks", "crm", "documents", "tenders", "commercial", "construction",
                       "time-tracking", "resources", "calendar", "references", "objects"],
    recommended_modules=["projects", "tasks", "crm", "documents", "commercial", "references", "objects"],
    phases=[
        DisciplinePhase(code="BRIEF", name="Brief", description="Analyse du brief et des besoins", percentage=5),
        DisciplinePhase(code="CONCEPT", name="Concept", description="Recherches et concept créatif", percentage=15),
        DisciplinePhase(code="APS", name="Avant-Projet", description="Développement avant-projet", percentage=20),
        DisciplinePhase(code="PRO", name="Projet", description="Plans d'exécution et détails", percentage=25),
        DisciplinePhase(code="CONSULT", name="Consultation", description="Consultation des entreprises", percentage=10),
        DisciplinePhase(code="SUIVI", name="Suivi chantier", description="Suivi de réalisation", percentage=20),
        DisciplinePhase(code="LIVRAISON", name="Livraison", description="Réception et livraison", percentage=5),
    ],
    project_types=[
        DisciplineProjectType(value="amenagement", label="Aménagement", description="Aménagement intérieur complet", icon="LayoutGrid"),
        DisciplineProjectType(value="retail", label="Retail", description="Boutiques et espaces commerciaux", icon="Store"),
        DisciplineProjectType(value="residential", label="Résidentiel", description="Appartements et maisons", icon="Home"),
        DisciplineProjectType(value="hospitality", label="Hospitality", description="Hôtels, restaurants, bars", icon="UtensilsCrossed"),
        DisciplineProjectType(value="workspace", label="Bureaux", description="Espaces de travail", icon="Building"),
    ],
    crm_pipeline_stages=["Premier contact", "Rencontre", "Brief reçu", "Proposition envoyée",
                         "Négociation", "Signé", "Perdu"],
    flags={
        "moe_fees": False,
        "surface_metrics": True,
        "site_visit": True,
        "construction_site": True,
        "itinerance": False,
        "media_plan": False,
    },
)


# ============================================================
# SCENOGRAPHY
# ============================================================
SCENOGRAPHY = DisciplineDefinition(
    slug=Discipline.scenography,
    name="Scénographie",
    short_name="Scéno",
    description="Expositions, muséographie, événementiel et stands",
    icon="Theater",
    color="hsl(340, 70%, 50%)",
    terminology=Terminology(
        project="Projet",
        projects="Projets",
        phase="Étape",
        phases="Étapes",
        lot="Lot",
        lots="Lots",
        chantier="Montage",
        client="Commanditaire",
        clients="Commanditaires",
        intervenant="Prestataire",
        intervenants="Prestataires",
        dce="Cahier des charges",
        devis="Proposition",
        contrat="Contrat",
        budget="Budget scénographie",
        surface="Surface d'exposition",
    ),
    tabs=_tender_tabs("Équipe & Budget", "DCE", "Note d'intention"),
    synthesis_blocks=[
        SynthesisBlockDef(key="exposition", label="Exposition", icon="Frame", component="ExpositionBlock", order=1),
        SynthesisBlockDef(key="budget", label="Budget", icon="Euro", component="BudgetBlock", order=2),
        SynthesisBlockDef(key="surface", label="Surface & Espaces", icon="Ruler", component="SurfaceBlock", order=3),
        SynthesisBlockDef(key="itinerance", label="Itinérance", icon="Truck", component="ItineranceBlock", order=4),
        SynthesisBlockDef(key="contraintes", label="Contraintes", icon="ShieldCheck", component="ContraintesBlock", order=5),
        SynthesisBlockDef(key="criteres", label="Critères", icon="Scale", component="CriteresBlock", order=6),
        SynthesisBlockDef(key="equipe_requise", label="Équipe requise", icon="Users", component="EquipeRequisBlock", order=7),
        SynthesisBlockDef(key="visite", label="Visite", icon="MapPin", component="VisiteBlock", order=8),
    ],
    form_sections=[
        SectionDef(key="general", label="Informations générales", icon="Info", order=1,
                   fields=["title", "reference", "description"]),
        SectionDef(key="client", label="Commanditaire", icon="Landmark", order=2,
                   fields=["client_name", "client_type", "commissaire_exposition"]),
        SectionDef(key="exposition", label="Exposition", icon="Frame", order=3,
                   fields=["lieu_exposition", "type_exposition", "thematique_exposition", "surface_exposition",
                           "duree_exposition_mois", "date_vernissage"]),
        SectionDef(key="programme", label="Programme", icon="LayoutGrid", order=4,
                   fields=["oeuvres_estimees", "dispositifs_multimedia", "parcours_type"]),
        SectionDef(key="contraintes", label="Contraintes", icon="ShieldCheck", order=5,
                   fields=["contraintes_conservation", "accessibilite_requise", "itinerance", "contraintes_patrimoniales"]),
        SectionDef(key="financial", label="Budget", icon="Euro", order=6,
                   fields=["estimated_budget", "budget_multimedia", "budget_graphisme"]),
        SectionDef(key="dates", label="Dates", icon="Calendar", order=7,
                   fields=["submission_deadline", "site_visit_date", "jury_date", "date_vernissage"]),
    ],
    available_modules=["projects", "tasks", "crm", "documents", "tenders", "commercial", "time-tracking",
                       "resources", "calendar", "references", "objects"],
    recommended_modules=["projects", "tasks", "crm", "documents", "tenders", "commercial", "references"],
    phases=[
        DisciplinePhase(code="BRIEF", name="Brief", description="Analyse du brief et intentions", percentage=5),
        DisciplinePhase(code="CONCEPT", name="Concept", description="Concept scénographique", percentage=20),
        DisciplinePhase(code="DEV", name="Développement", description="Développement du projet", percentage=25),
        DisciplinePhase(code="PROD", name="Production", description="Suivi de production", percentage=20),
        DisciplinePhase(code="MONTAGE", name="Montage", description="Montage sur site", percentage=25),
        DisciplinePhase(code="EXPLOIT", name="Exploitation", description="Suivi d'exploitation", percentage=5),
    ],
    project_types=[
        DisciplineProjectType(value="exposition", label="Exposition", description="Exposition temporaire ou permanente", icon="Frame"),
        DisciplineProjectType(value="musee", label="Muséographie", description="Parcours muséographique", icon="Landmark"),
        DisciplineProjectType(value="evenement", label="Événement", description="Scénographie événementielle", icon="PartyPopper"),
        DisciplineProjectType(value="stand", label="Stand", description="Stand de salon professionnel", icon="Box"),
        DisciplineProjectType(value="spectacle", label="Spectacle", description="Décor de spectacle", icon="Sparkles"),
    ],
    crm_pipeline_stages=["Appel d'offres reçu", "Visite", "Proposition envoyée", "Présentation",
                         "Négociation", "Lauréat", "Non retenu"],
    flags={
        "moe_fees": False,
        "surface_metrics": True,
        "site_visit": True,
        "construction_site": False,
        "itinerance": True,
        "media_plan": False,
    },
)


# ============================================================
# COMMUNICATION
# ============================================================
COMMUNICATION = DisciplineDefinition(
    slug=Discipline.communication,
    name="Agence de Communication",
    short_name="Comm",
    description="Campagnes, branding, digital et événementiel",
    icon="Megaphone",
    color="hsl(30, 70%, 50%)",
    terminology=Terminology(
        project="Projet",
        projects="Projets",
        phase="Phase",
        phases="Phases",
        lot="Livrable",
        lots="Livrables",
        chantier="Production",
        client="Annonceur",
        clients="Annonceurs",
        intervenant="Partenaire",
        intervenants="Partenaires",
        dce="Brief",
        devis="Proposition",
        contrat="Contrat",
        budget="Budget",
        surface="N/A",
    ),
    tabs=_tender_tabs("Équipe & Budget", "Brief", "Recommandation"),
    synthesis_blocks=[
        SynthesisBlockDef(key="brief", label="Brief", icon="FileText", component="BriefBlock", order=1),
        SynthesisBlockDef(key="budget", label="Budget", icon="Euro", component="BudgetBlock", order=2),
        SynthesisBlockDef(key="cibles", label="Cibles", icon="Target", component="CiblesBlock", order=3),
        SynthesisBlockDef(key="dispositif", label="Dispositif", icon="Megaphone", component="DispositifBlock", order=4),
        SynthesisBlockDef(key="criteres", label="Critères", icon="Scale", component="CriteresBlock", order=5),
        SynthesisBlockDef(key="equipe_requise", label="Équipe requise", icon="Users", component="EquipeRequisBlock", order=6),
        SynthesisBlockDef(key="visite", label="Visite", icon="MapPin", component="VisiteBlock", visible=False, order=7),
    ],
    form_sections=[
        SectionDef(key="general", label="Informations générales", icon="Info", order=1,
                   fields=["title", "reference", "description"]),
        SectionDef(key="client", label="Annonceur", icon="Building", order=2,
                   fields=["client_name", "client_type", "client_sector"]),
        SectionDef(key="campagne", label="Campagne", icon="Megaphone", order=3,
                   fields=["campaign_type", "target_audience", "channels", "campaign_duration_months"]),
        SectionDef(key="financial", label="Budget", icon="Euro", order=4,
                   fields=["estimated_budget", "media_budget", "production_budget"]),
        SectionDef(key="dates", label="Dates", icon="Calendar", order=5,
                   fields=["submission_deadline", "pitch_date", "results_date", "campaign_start_date"]),
    ],
    available_modules=["projects", "tasks", "crm", "documents", "commercial", "time-tracking", "resources",
                       "calendar", "campaigns", "media-planning"],
    recommended_modules=["projects", "tasks", "crm", "documents", "commercial", "time-tracking", "calendar",
                         "campaigns", "media-planning"],
    phases=[
        DisciplinePhase(code="BRIEF", name="Brief", description="Réception et analyse du brief", percentage=10),
        DisciplinePhase(code="STRAT", name="Stratégie", description="Recommandation stratégique", percentage=15),
        DisciplinePhase(code="CREA", name="Création", description="Création et conception", percentage=25),
        DisciplinePhase(code="PROD", name="Production", description="Production des livrables", percentage=30),
        DisciplinePhase(code="DIFFUSION", name="Diffusion", description="Mise en ligne et diffusion", percentage=10),
        DisciplinePhase(code="BILAN", name="Bilan", description="Analyse et bilan de campagne", percentage=10),
    ],
    project_types=[
        DisciplineProjectType(value="campagne", label="Campagne", description="Campagne de communication 360°", icon="Megaphone"),
        DisciplineProjectType(value="branding", label="Branding", description="Identité visuelle et branding", icon="Palette"),
        DisciplineProjectType(value="digital", label="Digital", description="Stratégie et contenus digitaux", icon="Globe"),
        DisciplineProjectType(value="evenementiel", label="Événementiel", description="Événements et activations", icon="Calendar"),
        DisciplineProjectType(value="contenu", label="Contenu", description="Production de contenus", icon="FileVideo"),
    ],
    crm_pipeline_stages=["Lead entrant", "Brief reçu", "Proposition envoyée", "Présentation",
                         "Négociation", "Signé", "Perdu"],
    flags={
        "moe_fees": False,
        "surface_metrics": False,
        "site_visit": False,
        "construction_site": False,
        "itinerance": False,
        "media_plan": True,
    },
)


# ============================================================
# REGISTRY
# ============================================================
DISCIPLINE_REGISTRY: Dict[Discipline, DisciplineDefinition] = {
    Discipline.architecture: ARCHITECTURE,
    Discipline.interior_design: INTERIOR_DESIGN,
    Discipline.scenography: SCENOGRAPHY,
    Discipline.communication: COMMUNICATION,
}


def is_discipline_valid(value: Union[str, Discipline, None]) -> bool:
    return normalize_discipline(value) in DISCIPLINE_REGISTRY


def get_discipline(value: Union[str, Discipline, None] = None) -> DisciplineDefinition:
    """Definition for `value`; the default discipline when unset or unknown."""
    slug = normalize_discipline(value)
    if slug is None or slug not in DISCIPLINE_REGISTRY:
        slug = DEFAULT_DISCIPLINE
    return DISCIPLINE_REGISTRY[slug]


def get_all_disciplines() -> List[DisciplineDefinition]:
    return [DISCIPLINE_REGISTRY[slug] for slug in DISCIPLINE_ORDER]


def get_discipline_options() -> List[DisciplineOption]:
    return [
        DisciplineOption(
            slug=d.slug,
            name=d.name,
            short_name=d.short_name,
            description=d.description,
            color=d.color,
            icon=d.icon,
        )
        for d in get_all_disciplines()
    ]


# ============================================================
# PER-DISCIPLINE ACCESSORS
# ============================================================
def get_default_phases(value: Union[str, Discipline, None]) -> List[DisciplinePhase]:
    return list(get_discipline(value).phases)


def get_project_types(value: Union[str, Discipline, None]) -> List[DisciplineProjectType]:
    return list(get_discipline(value).project_types)


def get_crm_pipeline_stages(value: Union[str, Discipline, None]) -> List[str]:
    return list(get_discipline(value).crm_pipeline_stages)


def is_module_available(value: Union[str, Discipline, None], module_slug: str) -> bool:
    """Whether the discipline offers the module at all (independent of enablement)."""
    return module_slug in get_discipline(value).available_modules


def is_module_recommended(value: Union[str, Discipline, None], module_slug: str) -> bool:
    return module_slug in get_discipline(value).recommended_modules
