# Log events and error codes of the redirect_link lambda
REDIRECT_SUCCESS = 'REDIRECT_SUCCESS'
CONFIGURATION_ERROR = 'CONFIGURATION_ERROR'
