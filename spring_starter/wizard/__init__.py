"""Selection wizard: prompts, configuration models and the ordered steps.

Usage::

    from spring_starter.wizard import RichPrompter, SelectionWizard

    configuration = SelectionWizard(catalog, RichPrompter()).run()
    if configuration is None:
        ...  # user cancelled
"""

from spring_starter.wizard.project import ProjectConfiguration, ProjectDraft
from spring_starter.wizard.prompts import Prompter, RichPrompter
from spring_starter.wizard.steps import WIZARD_STEPS, SelectionWizard, default_package_name

__all__ = [
    "Prompter",
    "ProjectConfiguration",
    "ProjectDraft",
    "RichPrompter",
    "SelectionWizard",
    "WIZARD_STEPS",
    "default_package_name",
]
