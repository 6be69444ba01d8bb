"""
Login, token refresh and logout.

Login hands out both a DRF token (``Authorization: Token <key>``) and a
SimpleJWT pair.  Kept apart from ``care.authentication`` so REST framework
can import the authentication class without importing these views.
"""
from __future__ import annotations

from django.contrib.auth import authenticate
from rest_framework.authtoken.models import Token
from rest_framework.decorators import api_view, permission_classes, throttle_classes
from rest_framework.exceptions import AuthenticationFailed, ValidationError
from rest_framework.permissions import AllowAny, IsAuthenticated
from rest_framework.response import Response
from rest_framework.throttling import ScopedRateThrottle
from rest_framework_simplejwt.exceptions import TokenError
from rest_framework_simplejwt.serializers import TokenRefreshSerializer
from rest_framework_simplejwt.token_blacklist.models import BlacklistedToken, OutstandingToken
from rest_framework_simplejwt.tokens import RefreshToken

from care.serializers.auth import LoginSerializer, LogoutSerializer, RefreshSerializer
from care.services.audit import log_action


def _profile_id(user) -> str | None:
    for related in ('patient', 'doctor', 'staff'):
        profile = getattr(user, related, None)
        if profile is not None:
            return profile.id
    return None


@api_view(['POST'])
@permission_classes([AllowAny])
@throttle_classes([ScopedRateThrottle])
def login_view(request):
    """Username/password login; the role comes from the account only."""
    s = LoginSerializer(data=request.data)
    s.is_valid(raise_exception=True)
    username = s.validated_data['username']
    ip = request.META.get('REMOTE_ADDR')

    user = authenticate(request, username=username, password=s.validated_data['password'])
    if not user:
        log_action(user=None, action='login', object_type='user',
                   detail={'result': 'fail', 'username': username, 'ip': ip})
        raise AuthenticationFailed('Invalid username or password')

    log_action(user=user, action='login', object_type='user', object_id=user.id,
               detail={'result': 'ok', 'ip': ip})

    token_obj, _ = Token.objects.get_or_create(user=user)
    refresh = RefreshToken.for_user(user)
    return Response({
        'ok': True,
        'token': token_obj.key,
        'jwt_access': str(refresh.access_token),
        'jwt_refresh': str(refresh),
        'role': user.role,
        'user': {
            'id': user.id,
            'username': user.username,
            'name': user.get_full_name() or user.username,
            'role': user.role,
            'profileId': _profile_id(user),
        },
    }, status=200)

# ScopedRateThrottle reads throttle_scope from the view
login_view.cls.throttle_scope = 'login'


@api_view(['POST'])
@permission_classes([AllowAny])
def jwt_refresh_view(request):
    """Return a new access token from a refresh token."""
    s = RefreshSerializer(data=request.data)
    s.is_valid(raise_exception=True)
    refresh = TokenRefreshSerializer(data={'refresh': s.validated_data['refresh']})
    try:
        refresh.is_valid(raise_exception=True)
    except TokenError as e:
        raise AuthenticationFailed(str(e))
    data = dict(refresh.validated_data)
    payload = {'ok': True, 'jwt_access': data.pop('access')}
    if 'refresh' in data:
        payload['jwt_refresh'] = data['refresh']
    return Response(payload)


@api_view(['POST'])
@permission_classes([IsAuthenticated])
def jwt_logout_view(request):
    """Blacklist one refresh token, or every outstanding one of the user."""
    s = LogoutSerializer(data=request.data)
    s.is_valid(raise_exception=True)
    refresh = s.validated_data.get('refresh')
    count = 0
    if refresh:
        try:
            token = RefreshToken(refresh)
        except TokenError as e:
            raise ValidationError({'refresh': [str(e)]})
        if str(token.get('user_id')) != str(request.user.id):
            raise ValidationError({'refresh': ['token belongs to another user']})
        token.blacklist()
        count = 1
    else:
        for token in OutstandingToken.objects.filter(user=request.user):
            _, created = BlacklistedToken.objects.get_or_create(token=token)
            count += int(created)
    Token.objects.filter(user=request.user).delete()
    log_action(user=request.user, action='logout', object_type='user', object_id=request.user.id,
               detail={'blacklisted': count})
    return Response({'ok': True, 'blacklisted': count})
