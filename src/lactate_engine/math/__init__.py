"""Pure numerical routines of the step-test analysis."""
