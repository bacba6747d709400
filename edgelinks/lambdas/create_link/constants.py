# Log events and error codes of the create_link lambda
LINK_CREATED = 'LINK_CREATED'
INVALID_JSON_BODY = 'INVALID_JSON_BODY'
CONFIGURATION_ERROR = 'CONFIGURATION_ERROR'
