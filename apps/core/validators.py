from django.core.validators import RegexValidator


# 10-digit Indian mobile number starting with 6-9
mobile_number_validator = RegexValidator(
    regex=r'^[6-9]\d{9}$',
    message='Please provide a valid 10-digit Indian mobile number',
    code='invalid_mobile_number',
)
