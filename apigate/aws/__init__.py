"""AWS resource compilers for apigate."""
