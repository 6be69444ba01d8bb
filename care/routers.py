"""
URL mappings for the clinic API.

Paths carry no trailing slash, matching the front-end client.
"""
from django.urls import include, path

from .auth_views import jwt_logout_view, jwt_refresh_view, login_view
from .views import appointments, dashboard, doctors, general, health, medical, patients, payments, services, staff

urlpatterns = [
    path('metrics', include('django_prometheus.urls')),
    path('healthz', health.healthz),
    # Authentication
    path('api/auth/login', login_view),
    path('api/auth/refresh', jwt_refresh_view),
    path('api/auth/logout', jwt_logout_view),
    # Dashboards
    path('api/admin/dashboard', dashboard.admin_dashboard),
    path('api/doctor/dashboard', dashboard.doctor_dashboard),
    path('api/patient/dashboard', dashboard.patient_dashboard),
    # Patients
    path('api/patients', patients.list_patients),
    path('api/patients/register', patients.register_patient),
    path('api/patients/update', patients.update_patient),
    path('api/patients/<str:pk>', patients.patient_detail),
    path('api/patients/<str:pk>/full', patients.patient_full_data),
    path('api/patients/<str:pk>/vitals', patients.patient_vitals),
    # Doctors
    path('api/doctors', doctors.list_doctors),
    path('api/doctors/all', doctors.all_doctors),
    path('api/doctors/available', doctors.available_today),
    path('api/doctors/create', doctors.create_doctor),
    path('api/doctors/<str:pk>', doctors.doctor_detail),
    path('api/doctors/<str:pk>/ratings', doctors.doctor_ratings),
    # Staff
    path('api/staff', staff.list_staff),
    path('api/staff/create', staff.create_staff),
    # Services
    path('api/services', services.list_services),
    path('api/services/create', services.create_service),
    # Appointments
    path('api/appointments', appointments.list_appointments),
    path('api/appointments/create', appointments.create_appointment),
    path('api/appointments/update-status', appointments.update_appointment_status),
    path('api/appointments/<int:pk>', appointments.appointment_detail),
    path('api/appointments/<int:pk>/medical', appointments.appointment_with_records),
    path('api/appointments/<int:pk>/vitals', appointments.add_vital_signs),
    # Medical records
    path('api/medical-records', medical.list_medical_records),
    path('api/medical/diagnosis', medical.add_diagnosis),
    # Payments
    path('api/payments', payments.list_payments),
    path('api/payments/bills/add', payments.add_bill),
    path('api/payments/generate', payments.generate_bill),
    # General
    path('api/records/delete', general.delete_record),
    path('api/ratings/create', general.create_rating),
]
