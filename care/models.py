"""
Database models for the clinic backend.

These models capture the core concepts of the system: login users with a
role, the patient/doctor/staff profiles attached to them, the services the
clinic offers, appointments and everything recorded against an
appointment (medical records, diagnoses, lab tests, vital signs, bills).
Field names mirror the camelCase payloads of the front-end in snake_case
so the JSON formatting in ``care.services`` stays a thin mapping.
"""
from __future__ import annotations

import uuid

from django.contrib.auth.models import AbstractUser
from django.core.validators import MaxValueValidator, MinValueValidator
from django.db import models


def new_profile_id() -> str:
    return uuid.uuid4().hex


class Role(models.TextChoices):
    ADMIN = 'admin', 'Administrator'
    DOCTOR = 'doctor', 'Doctor'
    STAFF = 'staff', 'Staff'
    PATIENT = 'patient', 'Patient'


class AppointmentStatus(models.TextChoices):
    SCHEDULED = 'SCHEDULED', 'Scheduled'
    PENDING = 'PENDING', 'Pending'
    COMPLETED = 'COMPLETED', 'Completed'
    CANCELLED = 'CANCELLED', 'Cancelled'


class Weekday(models.TextChoices):
    MONDAY = 'monday', 'Monday'
    TUESDAY = 'tuesday', 'Tuesday'
    WEDNESDAY = 'wednesday', 'Wednesday'
    THURSDAY = 'thursday', 'Thursday'
    FRIDAY = 'friday', 'Friday'
    SATURDAY = 'saturday', 'Saturday'
    SUNDAY = 'sunday', 'Sunday'


class Gender(models.TextChoices):
    MALE = 'MALE', 'Male'
    FEMALE = 'FEMALE', 'Female'


class User(AbstractUser):
    """Custom user model carrying the clinic role.

    Roles mirror the front-end route access table: 'admin', 'doctor',
    'staff' and 'patient'.  The clinical profile for a user lives in
    :class:`Patient`, :class:`Doctor` or :class:`Staff`.
    """
    role = models.CharField(max_length=10, choices=Role.choices, default=Role.PATIENT, db_index=True)

    def __str__(self) -> str:
        return f"{self.username} ({self.role})"


class Patient(models.Model):
    """Demographic and medical background of a patient."""
    MARITAL_CHOICES = [
        ('married', 'Married'),
        ('single', 'Single'),
        ('divorced', 'Divorced'),
        ('widowed', 'Widowed'),
        ('separated', 'Separated'),
    ]
    NUTRITIONAL_CHOICES = [
        ('normal', 'Normal'),
        ('underweight', 'Underweight'),
        ('overweight', 'Overweight'),
        ('stunted', 'Stunted'),
        ('obese', 'Obese'),
    ]
    RELATION_CHOICES = [
        ('mother', 'Mother'),
        ('father', 'Father'),
        ('husband', 'Husband'),
        ('wife', 'Wife'),
        ('other', 'Other'),
    ]

    id = models.CharField(max_length=64, primary_key=True, default=new_profile_id, editable=False)
    user = models.OneToOneField(User, null=True, blank=True, on_delete=models.SET_NULL, related_name='patient')
    first_name = models.CharField(max_length=50)
    last_name = models.CharField(max_length=50)
    email = models.EmailField(unique=True)
    phone = models.CharField(max_length=20)
    date_of_birth = models.DateField()
    gender = models.CharField(max_length=10, choices=Gender.choices)
    marital_status = models.CharField(max_length=20, choices=MARITAL_CHOICES, blank=True)
    nutritional_status = models.CharField(max_length=20, choices=NUTRITIONAL_CHOICES, blank=True)
    address = models.CharField(max_length=500)
    emergency_contact_name = models.CharField(max_length=50)
    emergency_contact_number = models.CharField(max_length=20, blank=True)
    relation = models.CharField(max_length=20, choices=RELATION_CHOICES, blank=True)
    blood_group = models.CharField(max_length=5, blank=True)
    allergies = models.TextField(blank=True)
    medical_conditions = models.TextField(blank=True)
    medical_history = models.TextField(blank=True)
    insurance_provider = models.CharField(max_length=255, blank=True)
    insurance_number = models.CharField(max_length=100, blank=True)
    privacy_consent = models.BooleanField(default=False)
    service_consent = models.BooleanField(default=False)
    medical_consent = models.BooleanField(default=False)
    img = models.CharField(max_length=512, blank=True)
    color_code = models.CharField(max_length=32, blank=True)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        indexes = [
            models.Index(fields=['first_name', 'last_name'], name='patient_name_idx'),
        ]

    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}".strip()

    def __str__(self) -> str:
        return f"{self.full_name} ({self.id})"


class Doctor(models.Model):
    JOB_TYPE_CHOICES = [
        ('FULL', 'Full time'),
        ('PART', 'Part time'),
    ]

    id = models.CharField(max_length=64, primary_key=True, default=new_profile_id, editable=False)
    user = models.OneToOneField(User, null=True, blank=True, on_delete=models.SET_NULL, related_name='doctor')
    email = models.EmailField(unique=True)
    name = models.CharField(max_length=255)
    specialization = models.CharField(max_length=255)
    license_number = models.CharField(max_length=64)
    phone = models.CharField(max_length=20)
    address = models.CharField(max_length=500)
    department = models.CharField(max_length=255, blank=True)
    img = models.CharField(max_length=512, blank=True)
    color_code = models.CharField(max_length=32, blank=True)
    # 'available' is the only value the availability lookup treats as bookable
    availability_status = models.CharField(max_length=32, default='available', db_index=True)
    type = models.CharField(max_length=10, choices=JOB_TYPE_CHOICES, default='FULL')
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    def __str__(self) -> str:
        return f"{self.name} ({self.specialization})"


class WorkingDay(models.Model):
    """A weekday on which a doctor holds consultations."""
    doctor = models.ForeignKey(Doctor, on_delete=models.CASCADE, related_name='working_days')
    day = models.CharField(max_length=10, choices=Weekday.choices)
    start_time = models.CharField(max_length=5)
    close_time = models.CharField(max_length=5)

    class Meta:
        indexes = [
            models.Index(fields=['day', 'doctor'], name='workingday_day_doctor_idx'),
        ]

    def __str__(self) -> str:
        return f"{self.doctor_id}: {self.day} {self.start_time}-{self.close_time}"


class Staff(models.Model):
    STATUS_CHOICES = [
        ('ACTIVE', 'Active'),
        ('INACTIVE', 'Inactive'),
        ('DORMANT', 'Dormant'),
    ]

    id = models.CharField(max_length=64, primary_key=True, default=new_profile_id, editable=False)
    user = models.OneToOneField(User, null=True, blank=True, on_delete=models.SET_NULL, related_name='staff')
    email = models.EmailField(unique=True)
    name = models.CharField(max_length=255)
    phone = models.CharField(max_length=20)
    address = models.CharField(max_length=500)
    department = models.CharField(max_length=255, blank=True)
    img = models.CharField(max_length=512, blank=True)
    license_number = models.CharField(max_length=64, blank=True)
    color_code = models.CharField(max_length=32, blank=True)
    hire_date = models.DateField(null=True, blank=True)
    salary = models.DecimalField(max_digits=12, decimal_places=2, null=True, blank=True)
    role = models.CharField(max_length=10, choices=Role.choices, default=Role.STAFF)
    status = models.CharField(max_length=10, choices=STATUS_CHOICES, default='ACTIVE')
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    def __str__(self) -> str:
        return f"{self.name} ({self.role})"


class Service(models.Model):
    CATEGORY_CHOICES = [
        ('CONSULTATION', 'Consultation'),
        ('LAB_TEST', 'Lab test'),
        ('VACCINATION', 'Vaccination'),
        ('PROCEDURE', 'Procedure'),
        ('PHARMACY', 'Pharmacy'),
        ('OTHER', 'Other'),
    ]
    service_name = models.CharField(max_length=255)
    description = models.TextField(blank=True)
    price = models.DecimalField(max_digits=10, decimal_places=2)
    category = models.CharField(max_length=20, choices=CATEGORY_CHOICES, default='CONSULTATION')
    duration = models.PositiveIntegerField(null=True, blank=True, help_text="Duration in minutes")
    is_available = models.BooleanField(default=True)
    created_at = models.DateTimeField(auto_now_add=True)

    def __str__(self) -> str:
        return self.service_name


class Appointment(models.Model):
    patient = models.ForeignKey(Patient, on_delete=models.CASCADE, related_name='appointments')
    doctor = models.ForeignKey(Doctor, on_delete=models.CASCADE, related_name='appointments')
    service = models.ForeignKey(Service, null=True, blank=True, on_delete=models.SET_NULL, related_name='appointments')
    appointment_date = models.DateTimeField(db_index=True)
    time = models.CharField(max_length=5)
    status = models.CharField(
        max_length=10, choices=AppointmentStatus.choices, default=AppointmentStatus.PENDING, db_index=True
    )
    type = models.CharField(max_length=64)
    note = models.TextField(blank=True)
    reason = models.TextField(blank=True)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        indexes = [
            models.Index(fields=['doctor', 'appointment_date'], name='appt_doctor_date_idx'),
            models.Index(fields=['patient', 'appointment_date'], name='appt_patient_date_idx'),
        ]

    def __str__(self) -> str:
        return f"Appointment #{self.id} {self.appointment_date:%F} ({self.status})"


class Payment(models.Model):
    """The bill raised for an appointment; line items live in PatientBill."""
    METHOD_CHOICES = [
        ('CASH', 'Cash'),
        ('CARD', 'Card'),
        ('MOBILE', 'Mobile money'),
        ('INSURANCE', 'Insurance'),
    ]
    STATUS_CHOICES = [
        ('PAID', 'Paid'),
        ('UNPAID', 'Unpaid'),
        ('PART', 'Part paid'),
    ]
    patient = models.ForeignKey(Patient, on_delete=models.CASCADE, related_name='payments')
    appointment = models.ForeignKey(Appointment, on_delete=models.CASCADE, related_name='bills')
    bill_date = models.DateTimeField()
    payment_date = models.DateTimeField()
    discount = models.DecimalField(max_digits=12, decimal_places=2, default=0)
    total_amount = models.DecimalField(max_digits=12, decimal_places=2, default=0)
    amount_paid = models.DecimalField(max_digits=12, decimal_places=2, default=0)
    payment_method = models.CharField(max_length=10, choices=METHOD_CHOICES, default='CASH')
    status = models.CharField(max_length=10, choices=STATUS_CHOICES, default='UNPAID')
    created_at = models.DateTimeField(auto_now_add=True)

    def __str__(self) -> str:
        return f"Payment #{self.id} for appointment {self.appointment_id}"


class PatientBill(models.Model):
    payment = models.ForeignKey(Payment, on_delete=models.CASCADE, related_name='items')
    service = models.ForeignKey(Service, on_delete=models.PROTECT, related_name='bill_items')
    service_date = models.DateTimeField()
    quantity = models.PositiveIntegerField()
    unit_cost = models.DecimalField(max_digits=12, decimal_places=2)
    total_cost = models.DecimalField(max_digits=12, decimal_places=2)
    created_at = models.DateTimeField(auto_now_add=True)

    def __str__(self) -> str:
        return f"{self.quantity} x {self.service_id} on bill {self.payment_id}"


class MedicalRecord(models.Model):
    patient = models.ForeignKey(Patient, on_delete=models.CASCADE, related_name='medical_records')
    appointment = models.ForeignKey(Appointment, on_delete=models.CASCADE, related_name='medical_records')
    doctor = models.ForeignKey(Doctor, null=True, blank=True, on_delete=models.SET_NULL, related_name='medical_records')
    treatment_plan = models.TextField(blank=True)
    prescriptions = models.TextField(blank=True)
    lab_request = models.TextField(blank=True)
    notes = models.TextField(blank=True)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    def __str__(self) -> str:
        return f"Record #{self.id} (appointment {self.appointment_id})"


class Diagnosis(models.Model):
    patient = models.ForeignKey(Patient, on_delete=models.CASCADE, related_name='diagnoses')
    medical_record = models.ForeignKey(MedicalRecord, on_delete=models.CASCADE, related_name='diagnoses')
    doctor = models.ForeignKey(Doctor, on_delete=models.CASCADE, related_name='diagnoses')
    symptoms = models.TextField()
    diagnosis = models.TextField()
    notes = models.TextField(blank=True)
    prescribed_medications = models.TextField(blank=True)
    follow_up_plan = models.TextField(blank=True)
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        verbose_name_plural = 'diagnoses'

    def __str__(self) -> str:
        return f"Diagnosis #{self.id} on record {self.medical_record_id}"


class LabTest(models.Model):
    medical_record = models.ForeignKey(MedicalRecord, on_delete=models.CASCADE, related_name='lab_tests')
    service = models.ForeignKey(Service, on_delete=models.PROTECT, related_name='lab_tests')
    test_date = models.DateTimeField()
    result = models.TextField(blank=True)
    status = models.CharField(max_length=20, default='Pending')
    notes = models.TextField(blank=True)
    created_at = models.DateTimeField(auto_now_add=True)

    def __str__(self) -> str:
        return f"Lab test #{self.id} ({self.status})"


class VitalSigns(models.Model):
    patient = models.ForeignKey(Patient, on_delete=models.CASCADE, related_name='vital_signs')
    medical_record = models.ForeignKey(MedicalRecord, on_delete=models.CASCADE, related_name='vital_signs')
    body_temperature = models.FloatField()
    systolic = models.PositiveIntegerField()
    diastolic = models.PositiveIntegerField()
    # free text such as "72" or "60-80"
    heart_rate = models.CharField(max_length=20)
    respiratory_rate = models.PositiveIntegerField(null=True, blank=True)
    oxygen_saturation = models.PositiveIntegerField(null=True, blank=True)
    weight = models.FloatField()
    height = models.FloatField()
    created_at = models.DateTimeField(auto_now_add=True, db_index=True)

    class Meta:
        verbose_name_plural = 'vital signs'
        indexes = [
            models.Index(fields=['patient', 'created_at'], name='vitals_patient_created_idx'),
        ]

    def __str__(self) -> str:
        return f"Vitals #{self.id} for {self.patient_id}"


class Rating(models.Model):
    patient = models.ForeignKey(Patient, on_delete=models.CASCADE, related_name='ratings')
    doctor = models.ForeignKey(Doctor, on_delete=models.CASCADE, related_name='ratings')
    rating = models.PositiveSmallIntegerField(validators=[MinValueValidator(1), MaxValueValidator(5)])
    comment = models.CharField(max_length=500)
    created_at = models.DateTimeField(auto_now_add=True)

    def __str__(self) -> str:
        return f"{self.rating}/5 for {self.doctor_id}"


class AuditEvent(models.Model):
    user = models.ForeignKey(User, on_delete=models.SET_NULL, null=True, blank=True)
    action = models.CharField(max_length=64)
    object_type = models.CharField(max_length=64, blank=True, null=True)
    object_id = models.CharField(max_length=64, blank=True, null=True)
    detail = models.JSONField(default=dict, blank=True)
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        indexes = [
            models.Index(fields=['action', 'created_at'], name='audit_action_created_idx'),
            models.Index(fields=['object_type', 'object_id', 'created_at'], name='audit_object_created_idx'),
        ]

    def __str__(self):
        return f"{self.action}:{self.user_id}@{self.created_at:%F %T}"
