from marshmallow import Schema, fields, validate, post_load, EXCLUDE
from medcycle.schemas.fields import strip_strings

class UserRegistrationSchema(Schema):
    class Meta:
        unknown = EXCLUDE

    email = fields.Email(
        required=True,
        validate=validate.Length(max=120, error="Email must be less than 120 characters")
    )

    password = fields.Str(
        required=True,
        validate=[
            validate.Length(min=8, error="Password must be at least 8 characters"),
        ]
    )

    first_name = fields.Str(
        required=True,
        validate=validate.Length(min=1, max=50, error="First name is required and must be less than 50 characters")
    )

    last_name = fields.Str(
        required=True,
        validate=validate.Length(min=1, max=50, error="Last name is required and must be less than 50 characters")
    )

    @post_load
    def clean_data(self, data, **kwargs):
        """Clean and normalize data after validation"""
        password = data.pop('password')
        strip_strings(data)
        data['password'] = password

        # Lowercase email
        if 'email' in data:
            data['email'] = data['email'].lower()

        return data

class UserLoginSchema(Schema):
    class Meta:
        unknown = EXCLUDE

    email = fields.Email(
        required=True,
        validate=validate.Email(error="Invalid email address")
    )

    password = fields.Str(
        required=True,
        validate=validate.Length(min=1, error="Password is required")
    )

    @post_load
    def clean_data(self, data, **kwargs):
        """Clean and normalize data after validation"""
        data['email'] = data['email'].strip().lower()
        return data
