from portal.states.registration_states import RegistrationStates

__all__ = ["RegistrationStates"]
