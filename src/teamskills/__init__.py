"""Team Skills Explorer: compare self-rated skills and build candidate teams."""
