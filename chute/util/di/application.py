"""Application layer DI providers."""

from dishka import Scope, provide

from chute.application.usecase.auth import (
    AddCredentialUseCase,
    AuthenticateUseCase,
    ListCredentialsUseCase,
    LoginUseCase,
    LogoutUseCase,
    RegisterUseCase,
)
from chute.application.usecase.freetime import (
    ListFreetimeUseCase,
    RemoveFreetimeUseCase,
    SubmitFreetimeUseCase,
    UpdateFreetimeUseCase,
)
from chute.application.usecase.invite import (
    AddAttendeesUseCase,
    AddMessageUseCase,
    CancelInviteUseCase,
    ChangeStatusUseCase,
    CreateInviteUseCase,
    GetInviteUseCase,
    ListInvitesUseCase,
)
from chute.application.usecase.profile import (
    GetProfileUseCase,
    ListFlagsUseCase,
    ListUtypesUseCase,
    SearchProfilesUseCase,
    UpdateProfileUseCase,
)
from chute.domain.service import (
    AvailabilityService,
    CredentialService,
    InvitationService,
    ProfileService,
)
from chute.util.di.base import ProviderBase


class ProdApplicationProvider(ProviderBase):
    """Production application use cases provider - concrete, no mocks needed."""

    scope = Scope.REQUEST

    # Auth use cases
    @provide
    def get_register_use_case(
        self, credential_service: CredentialService
    ) -> RegisterUseCase:
        """Provide register use case."""
        return RegisterUseCase(credential_service=credential_service)

    @provide
    def get_login_use_case(self, credential_service: CredentialService) -> LoginUseCase:
        """Provide login use case."""
        return LoginUseCase(credential_service=credential_service)

    @provide
    def get_logout_use_case(
        self, credential_service: CredentialService
    ) -> LogoutUseCase:
        return LogoutUseCase(credential_service=credential_service)

    @provide
    def get_authenticate_use_case(
        self, credential_service: CredentialService
    ) -> AuthenticateUseCase:
        return AuthenticateUseCase(credential_service=credential_service)

    @provide
    def get_add_credential_use_case(
        self, credential_service: CredentialService
    ) -> AddCredentialUseCase:
        return AddCredentialUseCase(credential_service=credential_service)

    @provide
    def get_list_credentials_use_case(
        self, credential_service: CredentialService
    ) -> ListCredentialsUseCase:
        return ListCredentialsUseCase(credential_service=credential_service)

    # Profile use cases
    @provide
    def get_profile_use_case(self, profile_service: ProfileService) -> GetProfileUseCase:
        """Provide get profile use case."""
        return GetProfileUseCase(profile_service=profile_service)

    @provide
    def get_update_profile_use_case(
        self, profile_service: ProfileService
    ) -> UpdateProfileUseCase:
        """Provide update profile use case."""
        return UpdateProfileUseCase(profile_service=profile_service)

    @provide
    def get_list_utypes_use_case(
        self, profile_service: ProfileService
    ) -> ListUtypesUseCase:
        return ListUtypesUseCase(profile_service=profile_service)

    @provide
    def get_list_flags_use_case(self, profile_service: ProfileService) -> ListFlagsUseCase:
        return ListFlagsUseCase(profile_service=profile_service)

    @provide
    def get_search_profiles_use_case(
        self, availability_service: AvailabilityService
    ) -> SearchProfilesUseCase:
        """Provide availability search use case."""
        return SearchProfilesUseCase(availability_service=availability_service)

    # Freetime use cases
    @provide
    def get_submit_freetime_use_case(
        self, availability_service: AvailabilityService
    ) -> SubmitFreetimeUseCase:
        return SubmitFreetimeUseCase(availability_service=availability_service)

    @provide
    def get_update_freetime_use_case(
        self, availability_service: AvailabilityService
    ) -> UpdateFreetimeUseCase:
        return UpdateFreetimeUseCase(availability_service=availability_service)

    @provide
    def get_list_freetime_use_case(
        self,
        availability_service: AvailabilityService,
        profile_service: ProfileService,
    ) -> ListFreetimeUseCase:
        return ListFreetimeUseCase(
            availability_service=availability_service,
            profile_service=profile_service,
        )

    @provide
    def get_remove_freetime_use_case(
        self, availability_service: AvailabilityService
    ) -> RemoveFreetimeUseCase:
        return RemoveFreetimeUseCase(availability_service=availability_service)

    # Invite use cases
    @provide
    def get_create_invite_use_case(
        self, invitation_service: InvitationService
    ) -> CreateInviteUseCase:
        """Provide create invite use case."""
        return CreateInviteUseCase(invitation_service=invitation_service)

    @provide
    def get_invite_use_case(
        self, invitation_service: InvitationService
    ) -> GetInviteUseCase:
        return GetInviteUseCase(invitation_service=invitation_service)

    @provide
    def get_cancel_invite_use_case(
        self, invitation_service: InvitationService
    ) -> CancelInviteUseCase:
        return CancelInviteUseCase(invitation_service=invitation_service)

    @provide
    def get_change_status_use_case(
        self, invitation_service: InvitationService
    ) -> ChangeStatusUseCase:
        return ChangeStatusUseCase(invitation_service=invitation_service)

    @provide
    def get_add_attendees_use_case(
        self, invitation_service: InvitationService
    ) -> AddAttendeesUseCase:
        return AddAttendeesUseCase(invitation_service=invitation_service)

    @provide
    def get_add_message_use_case(
        self, invitation_service: InvitationService
    ) -> AddMessageUseCase:
        return AddMessageUseCase(invitation_service=invitation_service)

    @provide
    def get_list_invites_use_case(
        self, invitation_service: InvitationService
    ) -> ListInvitesUseCase:
        return ListInvitesUseCase(invitation_service=invitation_service)
