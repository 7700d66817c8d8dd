import pytest

from utils.catalog import ProjectCatalog, validate_entry, sections_present
from utils.projects_data import PROJECTS_DATA, TEMPLATE_PROJECT_ID


@pytest.fixture
def catalog():
    return ProjectCatalog()


def test_get_known_project(catalog):
    entry = catalog.get('aws-portfolio')

    assert entry['title'] == 'Personal Portfolio Hosting on AWS'
    assert entry['links']['github'].startswith('https://github.com/')
    assert entry['badges'][0] == 'AWS S3'


def test_get_unknown_project_returns_none(catalog):
    assert catalog.get('does-not-exist') is None
    assert catalog.get('') is None
    assert 'does-not-exist' not in catalog


def test_get_returns_copy(catalog):
    entry = catalog.get('aws-portfolio')
    entry['badges'].append('Mutated')
    entry['title'] = 'Changed'

    fresh = catalog.get('aws-portfolio')
    assert fresh['title'] == 'Personal Portfolio Hosting on AWS'
    assert 'Mutated' not in fresh['badges']
    assert 'Mutated' not in PROJECTS_DATA['aws-portfolio']['badges']


def test_template_is_listed_only_on_request(catalog):
    assert TEMPLATE_PROJECT_ID in catalog
    assert catalog.is_template(TEMPLATE_PROJECT_ID)
    assert TEMPLATE_PROJECT_ID not in catalog.ids()
    assert TEMPLATE_PROJECT_ID in catalog.ids(include_template=True)
    assert [p['id'] for p in catalog.list_projects()] == ['aws-portfolio']
    assert len(catalog.list_projects(include_template=True)) == len(catalog)


def test_every_shipped_entry_is_valid():
    for entry in PROJECTS_DATA.values():
        assert validate_entry(entry) == []


def test_validate_entry_reports_missing_fields():
    entry = {'title': 'X', 'badges': [], 'links': {}}

    assert validate_entry(entry) == ['tagline', 'links.github']


def test_invalid_catalog_rejected():
    with pytest.raises(ValueError) as excinfo:
        ProjectCatalog({'broken': {'title': 'Broken', 'tagline': 'x', 'badges': 'AWS'}})

    assert 'broken' in str(excinfo.value)
    assert 'badges' in str(excinfo.value)


def test_optional_sections_may_be_absent():
    minimal = {
        'title': 'Minimal',
        'tagline': 'Only the required fields',
        'badges': [],
        'links': {'github': 'https://github.com/example/minimal'}
    }
    catalog = ProjectCatalog({'minimal': minimal})

    entry = catalog.get('minimal')
    assert sections_present(entry) == []
    assert entry.get('codeBlocks') is None


def test_sections_present_in_order(catalog):
    assert sections_present(catalog.get('aws-portfolio')) == [
        'overview', 'architecture', 'technicalDetails', 'features',
        'challenges', 'codeBlocks', 'metrics', 'lessons'
    ]


def test_code_samples_keep_literal_text(catalog):
    blocks = catalog.get('aws-portfolio')['codeBlocks']

    assert '${{ secrets.CLOUDFRONT_DIST_ID }}' in blocks[0]['code']
    assert "grep -E '\\.(html|css|js)$'" in blocks[0]['code']
