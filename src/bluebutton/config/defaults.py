"""
bluebutton.config.defaults - Built-in section rules.

Covers the sections of the My HealtheVet Blue Button text report.
"""

from bluebutton.core.models import ParserConfig

_MILITARY_SERVICE_COLUMNS = ["Service", "Begin Date", "End Date", "Character of Service", "Rank"]

DEFAULT_SECTIONS = {
    "MY HEALTHEVET PERSONAL INFORMATION REPORT": {
        "same_line_keys": ["Name", "Date of Birth"],
    },
    "DOWNLOAD REQUEST SUMMARY": {},
    "MY HEALTHEVET ACCOUNT SUMMARY": {
        "collection": {
            "Facilities": {"table_columns": ["VA Treating Facility", " Type"]},
        },
    },
    "DEMOGRAPHICS": {
        "collection": {
            "EMERGENCY CONTACTS": {"item_starts_with": "Contact First Name"},
        },
        "same_line_keys": [
            ["Gender", "Blood Type", "Organ Donor"],
            ["Work Phone Number", "Extension"],
        ],
    },
    "HEALTH CARE PROVIDERS": {
        "collection": {"Providers": {"item_starts_with": "Provider Name"}},
        "same_line_keys": ["Phone Number", "Ext"],
    },
    "TREATMENT FACILITIES": {
        "collection": {"Facilities": {"item_starts_with": "Facility Name"}},
        "same_line_keys": [
            ["Facility Type", "VA Home Facility"],
            ["Phone Number", "Ext"],
        ],
    },
    "HEALTH INSURANCE": {
        "collection": {"Companies": {"item_starts_with": "Health Insurance Company"}},
        "same_line_keys": [
            ["ID Number", "Group Number"],
            ["Start Date", "Stop Date"],
        ],
    },
    "VA WELLNESS REMINDERS": {
        "collection": {
            "Reminders": {
                "table_columns": ["Wellness Reminder", "Due Date", "Last Completed", "Location"],
            },
        },
    },
    "VA APPOINTMENTS": {
        "collection": {"Appointments": {"item_starts_with": "Date/Time"}},
        "skip_lines": ["^FUTURE APPOINTMENTS:", "^PAST APPOINTMENTS:"],
    },
    "VA MEDICATION HISTORY": {
        "collection": {"Medications": {"item_starts_with": "Medication"}},
    },
    "MEDICATIONS AND SUPPLEMENTS": {
        "collection": {"Medications": {"item_starts_with": "Category"}},
        "same_line_keys": [
            ["Start Date", "Stop Date"],
            ["Pharmacy Name", "Pharmacy Phone"],
        ],
    },
    "VA ALLERGIES": {
        "collection": {"Allergies": {"item_starts_with": "Allergy Name"}},
    },
    "ALLERGIES/ADVERSE REACTIONS": {
        "collection": {"Allergies": {"item_starts_with": "Allergy Name"}},
    },
    "MEDICAL EVENTS": {
        "collection": {"Event": {"item_starts_with": "Medical Event"}},
    },
    "IMMUNIZATIONS": {
        "collection": {"Immunizations": {"item_starts_with": "Immunization"}},
    },
    "VA LABORATORY RESULTS": {
        "collection": {"Labs": {"item_starts_with": "Lab Test"}},
    },
    "LABS AND TESTS": {
        "collection": {"Labs": {"item_starts_with": "Test Name"}},
    },
    "VITALS AND READINGS": {
        "collection": {"Reading": {"item_starts_with": "Measurement Type"}},
    },
    "FAMILY HEALTH HISTORY": {
        "collection": {"Relation": {"item_starts_with": "Relationship"}},
    },
    "MILITARY HEALTH HISTORY": {
        "same_line_keys": [
            ["Service Branch", "Rank"],
            ["Location of Service", "Onboard Ship"],
        ],
    },
    "DOD MILITARY SERVICE INFORMATION": {
        "collection": {
            "Regular Active Service": {
                "table_starts_with": "-- Regular Active Service",
                "table_columns": _MILITARY_SERVICE_COLUMNS,
            },
            "Reserve/Guard Association Periods": {
                "table_starts_with": "-- Reserve/Guard Association Periods",
                "table_columns": _MILITARY_SERVICE_COLUMNS,
            },
            "DoD MOS/Occupation Codes": {
                "table_starts_with": "-- Note: Both Service and DoD Generic codes",
                "table_columns": [
                    "Service",
                    "Begin Date",
                    "Enl/Off",
                    "Type",
                    "Svc Occ Code",
                    "DoD Occ Code",
                ],
            },
        },
        "skip_lines": ["^Translations of Codes Used in this Section"],
    },
}

DEFAULT_CONFIG = ParserConfig.from_dict(DEFAULT_SECTIONS)
