"""
Django admin registrations for the clinic models.

Superusers can inspect and correct data under ``/admin/``.
"""

from django.contrib import admin

from .models import (
    Appointment,
    AuditEvent,
    Diagnosis,
    Doctor,
    LabTest,
    MedicalRecord,
    Patient,
    PatientBill,
    Payment,
    Rating,
    Service,
    Staff,
    User,
    VitalSigns,
    WorkingDay,
)


@admin.register(User)
class UserAdmin(admin.ModelAdmin):
    list_display = ('username', 'role', 'is_staff', 'is_superuser')
    list_filter = ('role',)
    search_fields = ('username', 'first_name', 'last_name', 'email')


@admin.register(Patient)
class PatientAdmin(admin.ModelAdmin):
    list_display = ('id', 'first_name', 'last_name', 'gender', 'phone', 'email')
    list_filter = ('gender',)
    search_fields = ('id', 'first_name', 'last_name', 'phone', 'email')


class WorkingDayInline(admin.TabularInline):
    model = WorkingDay
    extra = 0


@admin.register(Doctor)
class DoctorAdmin(admin.ModelAdmin):
    list_display = ('id', 'name', 'specialization', 'department', 'availability_status', 'type')
    list_filter = ('availability_status', 'type', 'department')
    search_fields = ('id', 'name', 'specialization', 'email')
    inlines = [WorkingDayInline]


@admin.register(Staff)
class StaffAdmin(admin.ModelAdmin):
    list_display = ('id', 'name', 'role', 'status', 'department')
    list_filter = ('role', 'status')
    search_fields = ('id', 'name', 'email', 'phone')


@admin.register(Service)
class ServiceAdmin(admin.ModelAdmin):
    list_display = ('service_name', 'category', 'price', 'is_available')
    list_filter = ('category', 'is_available')
    search_fields = ('service_name',)


@admin.register(Appointment)
class AppointmentAdmin(admin.ModelAdmin):
    list_display = ('id', 'patient', 'doctor', 'appointment_date', 'time', 'status')
    list_filter = ('status',)
    search_fields = ('id', 'patient__first_name', 'patient__last_name', 'doctor__name')
    date_hierarchy = 'appointment_date'


class PatientBillInline(admin.TabularInline):
    model = PatientBill
    extra = 0


@admin.register(Payment)
class PaymentAdmin(admin.ModelAdmin):
    list_display = ('id', 'patient', 'appointment', 'total_amount', 'discount', 'amount_paid', 'status')
    list_filter = ('status', 'payment_method')
    search_fields = ('id', 'patient__first_name', 'patient__last_name')
    inlines = [PatientBillInline]


@admin.register(MedicalRecord)
class MedicalRecordAdmin(admin.ModelAdmin):
    list_display = ('id', 'patient', 'appointment', 'doctor', 'created_at')
    search_fields = ('id', 'patient__first_name', 'patient__last_name')


@admin.register(Diagnosis)
class DiagnosisAdmin(admin.ModelAdmin):
    list_display = ('id', 'patient', 'doctor', 'medical_record', 'created_at')
    search_fields = ('diagnosis', 'symptoms')


@admin.register(LabTest)
class LabTestAdmin(admin.ModelAdmin):
    list_display = ('id', 'medical_record', 'service', 'status', 'test_date')
    list_filter = ('status',)


@admin.register(VitalSigns)
class VitalSignsAdmin(admin.ModelAdmin):
    list_display = ('id', 'patient', 'systolic', 'diastolic', 'heart_rate', 'created_at')


@admin.register(Rating)
class RatingAdmin(admin.ModelAdmin):
    list_display = ('doctor', 'patient', 'rating', 'created_at')
    list_filter = ('rating',)


@admin.register(AuditEvent)
class AuditEventAdmin(admin.ModelAdmin):
    list_display = ('action', 'user', 'object_type', 'object_id', 'created_at')
    list_filter = ('action', 'object_type')
    search_fields = ('object_id', 'user__username')
