"""Property type codes used by the UI mapped to the labels stored on listings."""

PROPERTY_TYPE_LABELS = {
    "single_family": "Single Family",
    "condo": "Condominium",
    "multi_family": "Multi Family",
    "townhouse": "Townhouse",
    "land": "Land",
    "commercial": "Commercial",
    "business_opp": "Business Opportunity",
}

# Client need forms offer rental types the listing search does not
CLIENT_NEED_TYPE_LABELS = {
    **PROPERTY_TYPE_LABELS,
    "residential_rental": "Residential Rental",
    "commercial_rental": "Commercial Rental",
}
