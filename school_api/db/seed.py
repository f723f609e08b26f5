"""
Sample rows inserted the first time the store is initialized.

Each student has exactly one matching contact.
"""

SAMPLE_STUDENTS = [
    {"studentid": 1, "firstname": "John", "lastname": "Doe", "dateofbirth": "2000-01-01", "grade": 5, "gender": "Male"},
    {"studentid": 2, "firstname": "Jane", "lastname": "Smith", "dateofbirth": "2001-02-02", "grade": 7, "gender": "Female"},
    {"studentid": 3, "firstname": "Alex", "lastname": "Johnson", "dateofbirth": "1999-03-03", "grade": 8, "gender": "Male"},
    {"studentid": 4, "firstname": "Eva", "lastname": "Williams", "dateofbirth": "2002-04-04", "grade": 6, "gender": "Female"},
    {"studentid": 5, "firstname": "Michael", "lastname": "Brown", "dateofbirth": "2003-05-05", "grade": 4, "gender": "Male"},
]

SAMPLE_CONTACTS = [
    {"studentid": 1, "email": "john@example.com", "mblnumber": "1111111111", "address": "123 Main St", "guardianname": "Guardian Doe"},
    {"studentid": 2, "email": "jane@example.com", "mblnumber": "2222222222", "address": "456 Elm St", "guardianname": "Guardian Smith"},
    {"studentid": 3, "email": "alex@example.com", "mblnumber": "3333333333", "address": "789 Oak St", "guardianname": "Guardian Johnson"},
    {"studentid": 4, "email": "eva@example.com", "mblnumber": "4444444444", "address": "101 Pine St", "guardianname": "Guardian Williams"},
    {"studentid": 5, "email": "michael@example.com", "mblnumber": "5555555555", "address": "202 Maple St", "guardianname": "Guardian Brown"},
]
