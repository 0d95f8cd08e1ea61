"""Shared fixtures for the organization directory tests."""

import os
import sys

# Add the src directory to the Python path
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..', 'src'))

import pytest

from org_directory.core.facets import build_vocabulary
from org_directory.core.models import Organization


@pytest.fixture
def scenario_records():
    """The two-record directory used throughout the examples."""
    return [
        Organization(id="1", name="Zeta", type="NGO/Legal", founded_year=2005),
        Organization(id="2", name="Alpha", type="NGO/Medical", founded_year=1998),
    ]


@pytest.fixture
def directory_rows():
    """Raw rows as the data store returns them."""
    return [
        {
            "id": 1,
            "name": "Sudan Relief Network",
            "type": "NGO/Medical, Coalition",
            "areas_of_operation": "Sudan/Darfur (North), Sudan/Khartoum",
            "status": "Active",
            "visibility": "Public (verified)",
            "tags": "health, relief",
            "founded_year": 2012,
            "description_english": "Field hospitals and mobile clinics.",
        },
        {
            "id": 2,
            "name": "Legal Aid Collective",
            "type": "NGO / Legal",
            "areas_of_operation": "Sudan / Darfur (South), Chad",
            "status": "Active",
            "visibility": "Private",
            "tags": "legal, advocacy",
            "founded_year": 1999,
            "description_english": "Documentation of rights violations.",
        },
        {
            "id": 3,
            "name": "Diaspora Voices",
            "type": "Grassroots",
            "areas_of_operation": "Diaspora",
            "status": "Inactive",
            "visibility": None,
            "tags": ["advocacy", "media"],
            "founded_year": None,
            "description_english": None,
        },
    ]


@pytest.fixture
def directory_records(directory_rows):
    return [Organization.from_dict(row) for row in directory_rows]


@pytest.fixture
def directory_vocabulary(directory_records):
    return build_vocabulary(directory_records)
