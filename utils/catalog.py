"""
Catalog Module - Read-only lookup over the static project catalog
Entries are plain dicts; sections missing from an entry are simply not rendered.
"""

import copy

from .projects_data import PROJECTS_DATA, TEMPLATE_PROJECT_ID


REQUIRED_FIELDS = ('title', 'tagline', 'badges', 'links.github')
OPTIONAL_SECTIONS = (
    'overview', 'architecture', 'technicalDetails', 'features',
    'challenges', 'codeBlocks', 'metrics', 'lessons'
)


def validate_entry(entry):
    """
    Check an entry for its required fields

    Args:
        entry (dict): Project entry

    Returns:
        list: Dotted names of the missing required fields (empty when valid)
    """
    missing = []
    for field in REQUIRED_FIELDS:
        value = entry
        for part in field.split('.'):
            value = value.get(part) if isinstance(value, dict) else None
        if field == 'badges':
            if not isinstance(value, (list, tuple)):
                missing.append(field)
        elif not value:
            missing.append(field)
    return missing


class ProjectCatalog:
    """Immutable mapping from project slug to project entry"""

    def __init__(self, data=None, template_id=TEMPLATE_PROJECT_ID):
        self._entries = copy.deepcopy(PROJECTS_DATA if data is None else data)
        self.template_id = template_id
        self.validate()

    def validate(self):
        """Raise ValueError naming every entry with missing required fields"""
        problems = {}
        for project_id, entry in self._entries.items():
            missing = validate_entry(entry)
            if missing:
                problems[project_id] = missing
        if problems:
            details = '; '.join(f"{pid}: {', '.join(fields)}" for pid, fields in problems.items())
            raise ValueError(f"Invalid project catalog entries - {details}")

    def get(self, project_id):
        """Return a copy of the entry, or None when the id is unknown"""
        entry = self._entries.get(project_id)
        if entry is None:
            return None
        return copy.deepcopy(entry)

    def ids(self, include_template=False):
        return [pid for pid in self._entries
                if include_template or pid != self.template_id]

    def list_projects(self, include_template=False):
        """Summaries of catalog entries in authoring order, template excluded by default"""
        return [
            {
                'id': pid,
                'title': self._entries[pid]['title'],
                'tagline': self._entries[pid]['tagline'],
                'badges': list(self._entries[pid]['badges'])
            }
            for pid in self.ids(include_template=include_template)
        ]

    def is_template(self, project_id):
        return project_id == self.template_id

    def __contains__(self, project_id):
        return project_id in self._entries

    def __len__(self):
        return len(self._entries)


def sections_present(entry):
    """Names of the optional sections an entry actually carries"""
    return [name for name in OPTIONAL_SECTIONS if entry.get(name)]
