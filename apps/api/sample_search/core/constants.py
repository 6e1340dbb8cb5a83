"""Shared API constants."""

# Default page size for sample search (server meta and client table)
PAGE_SIZE = 15

# Resource type tags used in the JSON:API-style envelope
SAMPLE_RESOURCE_TYPE = "sample"
PROFILE_RESOURCE_TYPE = "profile"
ORGANISATION_RESOURCE_TYPE = "organisation"

# Organisation name that enables resultType / patientId
EXTENDED_FIELDS_ORG_NAME = "Circle"

# Client messages shown when loading fails
ORGANISATIONS_FETCH_ERROR = "Failed to fetch organisations."
SAMPLES_FETCH_ERROR = "Failed to fetch data. Please try again."

# Shown in the client table when a sample's profile is missing from `included`
UNKNOWN_PATIENT_NAME = "Unknown"
